from registrar.engines import RuleMatcher
from registrar.models import AssignmentRule, Department, EnrollmentDescriptor, Level


def make_rule(**fields):
    data = {"id": "r", "subjectSetId": "set"}
    data.update(fields)
    return AssignmentRule.from_dict(data)


def test_college_rule_matches_course_year_and_semester():
    rule = make_rule(level="college", courseCode="BSIT", yearLevel=2,
                     semester="first-sem", subjectSetId="S1")
    descriptor = EnrollmentDescriptor.college("BSIT", 2, "first-sem")

    assert RuleMatcher().match([rule], descriptor) is rule


def test_college_rule_requires_every_field():
    rules = [
        make_rule(level="college", courseCode="BSIT", yearLevel=2, semester="second-sem"),
        make_rule(level="college", courseCode="BSIT", yearLevel=3, semester="first-sem"),
        make_rule(level="college", courseCode="BSCS", yearLevel=2, semester="first-sem"),
    ]
    descriptor = EnrollmentDescriptor.college("BSIT", 2, "first-sem")

    assert RuleMatcher().match(rules, descriptor) is None


def test_jhs_matches_on_grade_level_only():
    rule = make_rule(level="high-school", gradeLevel=8, strand="ABM", semester="second-sem")
    descriptor = EnrollmentDescriptor.high_school(8, Department.JHS)

    assert RuleMatcher().match([rule], descriptor) is rule


def test_shs_requires_strand_and_semester():
    abm = make_rule(id="abm", level="high-school", gradeLevel=11, strand="ABM", semester="first-sem")
    stem_second = make_rule(id="stem2", level="high-school", gradeLevel=11, strand="STEM",
                            semester="second-sem")
    stem_first = make_rule(id="stem1", level="high-school", gradeLevel=11, strand="STEM",
                           semester="first-sem")
    descriptor = EnrollmentDescriptor.high_school(11, Department.SHS, "STEM", "first-sem")

    assert RuleMatcher().match([abm, stem_second, stem_first], descriptor) is stem_first


def test_level_must_match():
    rule = make_rule(level="college", gradeLevel=8)
    descriptor = EnrollmentDescriptor.high_school(8)

    assert RuleMatcher().match([rule], descriptor) is None


def test_unknown_rule_level_never_matches():
    rule = make_rule(level="elementary", gradeLevel=8)

    assert rule.level is None
    assert RuleMatcher().match([rule], EnrollmentDescriptor.high_school(8)) is None


def test_first_rule_wins_on_ties():
    first = make_rule(id="first", level="high-school", gradeLevel=8, subjectSetId="a")
    second = make_rule(id="second", level="high-school", gradeLevel=8, subjectSetId="b")
    matcher = RuleMatcher()
    descriptor = EnrollmentDescriptor.high_school(8)

    assert matcher.match([first, second], descriptor) is first
    assert matcher.match_all([first, second], descriptor) == [first, second]


def test_empty_rule_table_returns_none():
    assert RuleMatcher().match([], EnrollmentDescriptor.high_school(8)) is None


def test_string_grade_levels_in_rules_are_parsed():
    rule = make_rule(level="high-school", gradeLevel="8")

    assert RuleMatcher().match([rule], EnrollmentDescriptor.high_school(8)) is rule


def test_descriptor_without_grade_does_not_match_rule_without_grade():
    rule = make_rule(level="high-school")
    descriptor = EnrollmentDescriptor(level=Level.HIGH_SCHOOL)

    assert RuleMatcher().match([rule], descriptor) is None
