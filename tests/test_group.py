import pytest

from numtheory.common import NumberTheoryError
from numtheory.group import Group, GroupError, OperationRule


def test_constructor_modulo_group_from_source():
    group = Group([1, 2, 3], OperationRule.MODULO)
    assert group.identity == 1
    assert group.mod == 5
    assert group.elements == (1, 2, 3)


def test_format_lists_elements_and_identity():
    group = Group([1, 2, 3], OperationRule.MODULO)
    assert group.format() == (
        "Element of current group:\n1 2 3\nGroup identity: 1"
    )


def test_contains():
    group = Group([1, 2, 3], OperationRule.MODULO)
    assert 2 in group
    assert 4 not in group
    assert len(group) == 3


def test_modulo_group_with_other_modulus():
    group = Group([1, 2, 4], OperationRule.MODULO, 7)
    assert group.identity == 1


def test_identity_not_first_element():
    group = Group([4, 1], OperationRule.MODULO, 5)
    assert group.identity == 1


def test_element_not_below_modulus_rejected():
    with pytest.raises(GroupError):
        Group([1, 5], OperationRule.MODULO, 5)


def test_missing_identity_rejected():
    with pytest.raises(GroupError):
        Group([2], OperationRule.MODULO, 5)


def test_missing_inverse_rejected():
    with pytest.raises(GroupError):
        Group([0, 1], OperationRule.MODULO, 5)


def test_addition_closure_failure():
    with pytest.raises(GroupError):
        Group([2, 3], OperationRule.ADDITION)


def test_addition_single_element_group():
    group = Group([4], OperationRule.ADDITION)
    assert group.identity == 0
    assert 4 in group


def test_multiplication_group():
    group = Group([1, 4], OperationRule.MULTIPLICATION)
    assert group.elements == (1, 4)
    assert group.op is OperationRule.MULTIPLICATION


def test_multiplication_closure_failure():
    with pytest.raises(GroupError):
        Group([1, 2, 3], OperationRule.MULTIPLICATION)


def test_non_positive_modulus_rejected():
    with pytest.raises(GroupError):
        Group([1], OperationRule.MODULO, 0)


def test_negative_element_rejected():
    with pytest.raises(GroupError):
        Group([-1, 1], OperationRule.ADDITION)


def test_group_error_is_package_error():
    with pytest.raises(NumberTheoryError):
        Group([3], OperationRule.MODULO, 5)


def test_empty_addition_group_formats_as_empty():
    group = Group([], OperationRule.ADDITION)
    assert group.format() == "Empty group."


def test_empty_modulo_group_rejected():
    with pytest.raises(GroupError):
        Group([], OperationRule.MODULO)