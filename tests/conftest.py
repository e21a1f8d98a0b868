import pytest

from registrar.models import AssignmentRule, Subject, SubjectSet


@pytest.fixture
def subjects():
    records = [
        {"id": "eng-7", "code": "ENG7", "name": "English 7", "lectureUnits": 3, "labUnits": 0},
        {"id": "math-7", "code": "MATH7", "name": "Mathematics 7", "lectureUnits": 3, "labUnits": 0},
        {"id": "eng-8", "code": "ENG8", "name": "English 8", "lectureUnits": 3, "labUnits": 0,
         "prerequisites": ["eng-7"]},
        {"id": "math-8", "code": "MATH8", "name": "Mathematics 8", "lectureUnits": 3, "labUnits": 0,
         "prerequisites": ["math-7"]},
        {"id": "sci-8", "code": "SCI8", "name": "Science 8", "lectureUnits": 2, "labUnits": 1},
        {"id": "ict-8", "code": "ICT8", "name": "Computer Literacy 8", "lectureUnits": 1, "labUnits": 1},
        {"id": "gen-math", "code": "GENMATH", "name": "General Mathematics", "lectureUnits": 3},
        {"id": "it-201", "code": "IT201", "name": "Data Structures", "lectureUnits": 2, "labUnits": 1},
        {"id": "it-202", "code": "IT202", "name": "OOP", "lectureUnits": 2, "labUnits": 1},
    ]
    return {r["id"]: Subject.from_dict(r) for r in records}


@pytest.fixture
def subject_sets():
    records = [
        {"id": "g7-core", "name": "Grade 7 Core", "subjects": ["eng-7", "math-7"], "gradeLevel": 7},
        {"id": "g8-electives", "name": "Grade 8 Electives", "subjects": ["ict-8", "sci-8"], "gradeLevel": 8},
        {"id": "g8-core", "name": "Grade 8 Core", "subjects": ["eng-8", "math-8", "sci-8"],
         "gradeLevels": [8]},
        {"id": "stem-11", "name": "STEM 11", "subjects": ["gen-math"], "gradeLevels": [11, 12]},
        {"id": "S1", "name": "BSIT 2-1", "subjects": ["it-201", "it-202"],
         "courseSelections": [{"code": "BSIT", "year": 2, "semester": "first-sem"}]},
        {"id": "S2", "name": "BSIT 2-2", "subjects": ["it-202"],
         "courseSelections": [{"code": "BSIT", "year": 2, "semester": "second-sem"}]},
    ]
    return [SubjectSet.from_dict(r) for r in records]


@pytest.fixture
def rules():
    records = [
        {"id": "r-g7", "level": "high-school", "gradeLevel": 7, "subjectSetId": "g7-core"},
        {"id": "r-g8", "level": "high-school", "gradeLevel": 8, "subjectSetId": "g8-core"},
        {"id": "r-stem", "level": "high-school", "gradeLevel": 11, "department": "SHS",
         "strand": "STEM", "semester": "first-sem", "subjectSetId": "stem-11"},
        {"id": "r-bsit", "level": "college", "courseCode": "BSIT", "yearLevel": 2,
         "semester": "first-sem", "subjectSetId": "S1"},
    ]
    return [AssignmentRule.from_dict(r) for r in records]
