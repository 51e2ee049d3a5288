import itertools

import pytest

from src.models.profile import ExperienceEntry, Profile
from src.scoring.strength import CATEGORIES, evaluate_strength, strength_level

CATEGORY_NAMES = (
    "Basic Information",
    "Professional Summary",
    "Skills",
    "Experience",
    "Education",
    "Documents",
    "Profile Image",
    "Career Highlights",
)

_PARTS = {
    "Basic Information": {"name": "Ana", "position": "Dev", "location": "NYC"},
    "Professional Summary": {"about": "Hi"},
    "Skills": {"skills": ["a", "b", "c"]},
    "Experience": {"experience": [ExperienceEntry()]},
    "Education": {"education": [{"degree": "BSc"}]},
    "Documents": {"documents": [{"name": "cv.pdf"}]},
    "Profile Image": {"profile_image": "img-ref-1"},
    "Career Highlights": {"career_highlights": [{"title": "Award"}]},
}


def _profile_with(*names: str) -> Profile:
    kwargs = {}
    for name in names:
        kwargs.update(_PARTS[name])
    return Profile(**kwargs)


def test_table_order_and_icons():
    assert tuple(c.name for c in CATEGORIES) == CATEGORY_NAMES
    assert CATEGORIES[0].icon == "ri-user-line"
    assert CATEGORIES[-1].icon == "ri-medal-line"


def test_empty_profile():
    report = evaluate_strength(Profile())
    assert report.percentage == 0
    assert report.label == "Just starting"
    assert tuple(c.name for c in report.missing_categories) == CATEGORY_NAMES


def test_all_star():
    report = evaluate_strength(_profile_with(*CATEGORY_NAMES))
    assert report.percentage == 100
    assert report.missing_categories == ()
    assert report.label == "All star profile!"
    assert report.tone == "green"


def test_basic_information_needs_every_field():
    report = evaluate_strength(Profile(name="Ana", position="Dev"))
    assert report.missing_categories[0].name == "Basic Information"


def test_skills_threshold():
    two = evaluate_strength(Profile(skills=["a", "b"]))
    three = evaluate_strength(Profile(skills=["a", "b", "c"]))
    assert "Skills" in [c.name for c in two.missing_categories]
    assert "Skills" not in [c.name for c in three.missing_categories]


def test_empty_education_is_missing():
    report = evaluate_strength(Profile(education=[]))
    assert "Education" in [c.name for c in report.missing_categories]


def test_segments_follow_table():
    report = evaluate_strength(_profile_with("Skills", "Documents"))
    assert [(c.name, done) for c, done in report.segments] == [
        (name, name in ("Skills", "Documents")) for name in CATEGORY_NAMES
    ]


def test_missing_icons_passed_through():
    report = evaluate_strength(_profile_with("Basic Information"))
    assert report.missing_categories[0].name == "Professional Summary"
    assert report.missing_categories[0].icon == "ri-file-text-line"


@pytest.mark.parametrize("count, expected", [
    (0, 0), (1, 13), (2, 25), (3, 38), (4, 50), (5, 63), (6, 75), (7, 88), (8, 100),
])
def test_percentage_rounds_half_up(count, expected):
    for chosen in itertools.combinations(CATEGORY_NAMES, count):
        report = evaluate_strength(_profile_with(*chosen))
        assert report.percentage == expected
        assert len(report.missing_categories) == 8 - count


@pytest.mark.parametrize("score, label", [
    (0, "Just starting"),
    (13, "Just starting"),
    (24, "Just starting"),
    (25, "Getting there"),
    (38, "Getting there"),
    (50, "Almost complete"),
    (63, "Almost complete"),
    (75, "Very strong"),
    (88, "Very strong"),
    (99, "Very strong"),
    (100, "All star profile!"),
])
def test_label_boundaries(score, label):
    assert strength_level(score)[0] == label


def test_label_from_report():
    report = evaluate_strength(_profile_with("Skills", "Education"))
    assert report.percentage == 25
    assert report.label == "Getting there"
    assert report.tone == "yellow"
