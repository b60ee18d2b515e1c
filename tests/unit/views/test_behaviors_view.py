"""Tests for the behaviors view."""

from collections.abc import Sequence

from result_views.models.result import Label, LaunchResults, TestResult
from result_views.testing.factories import TestResultFactory
from result_views.views.behaviors import BehaviorsView, CsvExportBehavior
from result_views.views.behaviors.view import behavior_keys, group_by_behaviors


def labelled(
    status: str = "passed",
    epics: Sequence[str] = (),
    features: Sequence[str] = (),
    stories: Sequence[str] = (),
) -> TestResult:
    """Build a result carrying the given behavior labels."""
    labels = [
        *(Label(name="epic", value=value) for value in epics),
        *(Label(name="feature", value=value) for value in features),
        *(Label(name="story", value=value) for value in stories),
    ]
    return TestResultFactory.build(status=status, labels=labels)


class TestGroupByBehaviors:
    """Tests for group_by_behaviors grouping."""

    def test_one_layer_per_label(self) -> None:
        """Layers are epic, feature and story values."""
        result = labelled(epics=["E"], features=["F1", "F2"], stories=["S"])

        layers = group_by_behaviors(result)

        assert [layer.group_names() for layer in layers] == [
            ["E"],
            ["F1", "F2"],
            ["S"],
        ]

    def test_missing_labels_use_sentinels(self) -> None:
        """Each missing label falls back to its own sentinel."""
        layers = group_by_behaviors(labelled())

        assert [layer.group_names() for layer in layers] == [
            ["Without epic"],
            ["Without feature"],
            ["Without story"],
        ]


class TestBehaviorKeys:
    """Tests for behavior_keys function."""

    def test_expands_every_combination(self) -> None:
        """Multi-valued labels expand into their cross product."""
        result = labelled(epics=["E1", "E2"], features=["F"], stories=["S1", "S2"])

        assert behavior_keys(result) == [
            ("E1", "F", "S1"),
            ("E1", "F", "S2"),
            ("E2", "F", "S1"),
            ("E2", "F", "S2"),
        ]

    def test_missing_label_is_none(self) -> None:
        """Missing labels contribute None at their position."""
        assert behavior_keys(labelled(features=["F"])) == [(None, "F", None)]
        assert behavior_keys(labelled()) == [(None, None, None)]


class TestBehaviorsView:
    """Tests for BehaviorsView."""

    def test_scenario_shared_epic_two_features(self) -> None:
        """Two results in one epic with different features split below the epic."""
        results = [
            labelled(epics=["Checkout"], features=["Cart"]),
            labelled(epics=["Checkout"], features=["Payment"]),
        ]

        tree = BehaviorsView().build_tree([LaunchResults(results=results)])

        assert [group.name for group in tree.groups] == ["Checkout"]
        checkout = tree.groups[0]
        assert [group.name for group in checkout.groups] == ["Cart", "Payment"]
        for feature in checkout.groups:
            assert len(list(feature.leaves())) == 1

    def test_fans_out_over_all_epics(self) -> None:
        """Result with two epics has a leaf under each, not only the first."""
        result = labelled(epics=["A", "B"], features=["F"], stories=["S"])

        tree = BehaviorsView().build_tree([LaunchResults(results=[result])])

        assert [group.name for group in tree.groups] == ["A", "B"]
        assert len(list(tree.leaves())) == 2

    def test_statistic_counts_whole_subtree(self) -> None:
        """Epic statistic includes the leaves under its stories."""
        results = [
            labelled(status="failed", epics=["E"], features=["F"], stories=["S1"]),
            labelled(status="passed", epics=["E"], features=["F"], stories=["S2"]),
        ]
        view = BehaviorsView()

        tree = view.build_tree([LaunchResults(results=results)])
        statistic = view.statistic(tree.groups[0])

        assert statistic.failed == 1
        assert statistic.passed == 1

    def test_csv_rows_merge_shared_triples(self) -> None:
        """Results with the same epic, feature and story share one row."""
        results = [
            labelled(status="failed", epics=["E"], features=["F"], stories=["S"]),
            labelled(status="passed", epics=["E"], features=["F"], stories=["S"]),
            labelled(status="broken", features=["F"]),
        ]
        launches = [LaunchResults(results=results)]
        view = BehaviorsView()

        rows = view.csv_rows(launches, view.build_tree(launches))

        assert rows == [
            CsvExportBehavior(epic="E", feature="F", story="S", failed=1, passed=1),
            CsvExportBehavior(epic=None, feature="F", story=None, broken=1),
        ]

    def test_csv_rows_span_launches(self) -> None:
        """Rows merge contributions from every launch."""
        launches = [
            LaunchResults(results=[labelled(status="failed", epics=["E"])]),
            LaunchResults(results=[labelled(status="failed", epics=["E"])]),
        ]
        view = BehaviorsView()

        rows = view.csv_rows(launches, view.build_tree(launches))

        assert rows == [CsvExportBehavior(epic="E", failed=2)]

    def test_widget_limits_epics(self) -> None:
        """Widget shows at most ten epics but counts all of them."""
        results = [labelled(epics=[f"Epic {i}"]) for i in range(12)]
        view = BehaviorsView()

        widget = view.widget(view.build_tree([LaunchResults(results=results)]))

        assert len(widget.items) == 10
        assert widget.total == 12

    def test_render_columns(self) -> None:
        """CSV columns follow the export header."""
        output = BehaviorsView().render([LaunchResults(results=[])])

        assert output.name == "behaviors"
        assert output.columns == [
            "Epic",
            "Feature",
            "Story",
            "FAILED",
            "BROKEN",
            "PASSED",
            "SKIPPED",
            "UNKNOWN",
        ]
        assert output.rows == []
        assert output.widget.total == 0
