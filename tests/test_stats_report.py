# File: tests/test_stats_report.py

from cardapp.services.stats_report import empty_facets, shape_report
from tests.conftest import NOW


def test_no_rows_become_defaults(make_user):
    user = make_user()
    facets = {name: None for name in empty_facets()}

    report = shape_report(facets, user, NOW)

    assert report.total_cards == 0
    assert [(s.status, s.count) for s in report.total_status] == [
        ("todo", 0),
        ("doing", 0),
        ("done", 0),
    ]
    assert report.total_projects == 0
    assert report.cards_created_last_7_days == 0
    assert report.cards_completed_last_7_days == 0
    assert report.cards_completed_last_30_days == 0.0
    assert report.most_active_project_last_30_days is None
    assert report.generated_at == NOW.isoformat()


def test_missing_facets_are_tolerated(make_user):
    report = shape_report({"total_cards": 2}, make_user(), NOW)

    assert report.total_cards == 2
    assert len(report.total_status) == 3
    assert report.most_active_project_last_30_days is None


def test_status_counts_are_zero_filled_in_fixed_order(make_user):
    report = shape_report({"total_status": {"done": 4, "todo": 1}}, make_user(), NOW)

    assert [(s.status, s.count) for s in report.total_status] == [
        ("todo", 1),
        ("doing", 0),
        ("done", 4),
    ]


def test_user_summary_is_joined_in(make_user):
    user = make_user("bob", role="editor")
    report = shape_report({}, user, NOW)

    assert report.user.id == user.id
    assert report.user.username == "bob"
    assert report.user.email == "bob@example.com"
    assert report.user.role == "editor"


def test_empty_facets_returns_a_fresh_value():
    first = empty_facets()
    first["total_status"]["todo"] = 10

    assert empty_facets()["total_status"] == {}


def test_serializes_with_camel_case_names(make_user):
    report = shape_report(
        {"most_active_project_last_30_days": ("X", 3), "cards_completed_last_30_days": 2},
        make_user(),
        NOW,
    )
    data = report.model_dump(by_alias=True, mode="json")

    assert data["mostActiveProjectLast30Days"] == {"name": "X", "count": 3}
    assert data["cardsCompletedLast30Days"] == 2.0
    assert set(data) == {
        "totalCards",
        "totalStatus",
        "totalProjects",
        "cardsCreatedLast7Days",
        "cardsCompletedLast7Days",
        "cardsCompletedLast30Days",
        "mostActiveProjectLast30Days",
        "user",
        "generatedAt",
    }
