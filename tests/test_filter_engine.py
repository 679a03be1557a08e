from __future__ import annotations

from job_portal.services.filter_engine import (
    JOB_FILTERS,
    PROFILE_FILTERS,
    filter_records,
    parse_predicates,
)


PROFILES = [
    {
        "id": 1,
        "name": "John Carter",
        "email": "john@example.com",
        "phone": "5550001111",
        "skills": ["React", "TypeScript"],
        "experience": [{"company": "Tech Corp", "role": "Frontend Engineer", "duration": "2 years"}],
    },
    {"id": 2, "name": "Jane Doe", "email": "jane@example.com", "phone": "5550002222", "skills": ["React Native"]},
    {"id": 3, "name": "Johnny Park", "email": "jp@example.org", "phone": "5550003333"},
    {"id": 4, "name": "Ravi Kumar", "email": "ravi@example.com", "phone": "5550004444", "skills": ["react", "Go"]},
]

JOBS = [
    {
        "id": 1,
        "title": "Backend Developer",
        "company": "Tech Corp",
        "location": "Remote Bangalore",
        "salary": 100000,
        "description": "Build services in Go",
        "skillsRequired": ["Go", "SQL"],
    },
    {
        "id": 2,
        "title": "Frontend Developer",
        "company": "Pixel Ltd",
        "location": "Noida Sector 90",
        "description": "Build React interfaces",
        "skillsRequired": ["React"],
    },
    {
        "id": 3,
        "title": "Data Engineer",
        "company": "Tech Corp",
        "location": "remote",
        "experience": "3+ years",
        "salary": 120000.0,
        "description": "Pipelines and warehouses",
    },
]


def _ids(records) -> list[int]:
    return [r["id"] for r in records]


def test_empty_predicates_return_everything_in_order() -> None:
    assert filter_records(PROFILES, {}, PROFILE_FILTERS) == PROFILES
    assert filter_records(JOBS, {}, JOB_FILTERS) == JOBS


def test_array_field_uses_case_insensitive_exact_membership() -> None:
    # "React Native" is not "react"; profile 3 has no skills at all.
    assert _ids(filter_records(PROFILES, {"skills": "react"}, PROFILE_FILTERS)) == [1, 4]


def test_string_field_uses_case_insensitive_substring() -> None:
    assert _ids(filter_records(JOBS, {"location": "remote"}, JOB_FILTERS)) == [1, 3]
    assert _ids(filter_records(PROFILES, {"name": "JOHN"}, PROFILE_FILTERS)) == [1, 3]


def test_predicates_are_combined_with_and() -> None:
    predicates = {"skillsRequired": "go", "location": "bangalore"}
    assert _ids(filter_records(JOBS, predicates, JOB_FILTERS)) == [1]
    predicates = {"company": "tech", "title": "frontend"}
    assert filter_records(JOBS, predicates, JOB_FILTERS) == []


def test_missing_field_fails_its_predicate() -> None:
    assert _ids(filter_records(JOBS, {"experience": "years"}, JOB_FILTERS)) == [3]
    assert _ids(filter_records(JOBS, {"skillsRequired": "react"}, JOB_FILTERS)) == [2]


def test_unknown_keys_are_ignored() -> None:
    assert filter_records(JOBS, {"colour": "blue"}, JOB_FILTERS) == JOBS
    assert _ids(filter_records(PROFILES, {"location": "x", "email": "example.org"}, PROFILE_FILTERS)) == [3]


def test_profile_company_and_role_search_experience_entries() -> None:
    assert _ids(filter_records(PROFILES, {"company": "tech"}, PROFILE_FILTERS)) == [1]
    assert _ids(filter_records(PROFILES, {"role": "engineer"}, PROFILE_FILTERS)) == [1]
    assert filter_records(PROFILES, {"role": "manager"}, PROFILE_FILTERS) == []


def test_salary_is_numeric_equality() -> None:
    assert _ids(filter_records(JOBS, {"salary": "100000"}, JOB_FILTERS)) == [1]
    assert _ids(filter_records(JOBS, {"salary": "120000"}, JOB_FILTERS)) == [3]
    assert filter_records(JOBS, {"salary": "lots"}, JOB_FILTERS) == []


def test_parse_predicates_keeps_last_repeated_key_and_decodes() -> None:
    assert parse_predicates("skills=Go&skills=React") == {"skills": "React"}
    assert parse_predicates("location=Remote%20Bangalore&name=Jane+Doe") == {
        "location": "Remote Bangalore",
        "name": "Jane Doe",
    }
    assert parse_predicates("") == {}
    assert parse_predicates("name=") == {"name": ""}
