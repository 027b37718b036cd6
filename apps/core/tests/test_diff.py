from apps.core.diff import diff_sets
from apps.core.results import CommandProcessingResult


def test_diff_sets_added_and_removed():
    diff = diff_sets([1, 2, 3], [2, 3, 4])

    assert diff.added == {1}
    assert diff.removed == {4}
    assert diff.symmetric_difference == {1, 4}
    assert diff.changed


def test_diff_sets_ignores_order_and_duplicates():
    assert not diff_sets([3, 1, 1], [1, 3]).changed


def test_result_without_changes():
    result = CommandProcessingResult(office_id=1, group_id=2, entity_id=2)

    assert result.changes == {}
    assert not result.has_changes
