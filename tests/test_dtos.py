# tests/test_dtos.py
import pytest

from tasktracker.domain.dtos import CompleteTaskDto, CreateTaskDto, parse_int

TITLE_REQUIRED = "Title is required and must be a non-empty string"
TITLE_TOO_LONG = "Title must not exceed 255 characters"
DESCRIPTION_REQUIRED = "Description is required and must be a non-empty string"


@pytest.mark.parametrize("raw", ["Buy milk", "  padded  ", "\ttabbed\n", "", "   "])
def test_create_dto_trims_title(raw: str):
    assert CreateTaskDto(raw, "x").title == raw.strip()


def test_create_dto_trims_description():
    assert CreateTaskDto("t", "  some text \n").description == "some text"


def test_create_dto_valid():
    result = CreateTaskDto("Buy milk", "2%").validate()
    assert result.is_valid is True
    assert result.errors == []


def test_create_dto_empty_title():
    result = CreateTaskDto("", "x").validate()
    assert result.is_valid is False
    assert result.errors == [TITLE_REQUIRED]


def test_create_dto_title_at_limit_is_valid():
    assert CreateTaskDto("a" * 255, "x").validate().is_valid is True


def test_create_dto_title_over_limit_reports_only_length():
    result = CreateTaskDto("a" * 256, "x").validate()
    assert result.is_valid is False
    assert result.errors == [TITLE_TOO_LONG]


def test_create_dto_reports_all_errors_in_order():
    result = CreateTaskDto("   ", "   ").validate()
    assert result.errors == [TITLE_REQUIRED, DESCRIPTION_REQUIRED]

    result = CreateTaskDto("a" * 300, "").validate()
    assert result.errors == [TITLE_TOO_LONG, DESCRIPTION_REQUIRED]


def test_create_dto_from_payload_normalizes_non_strings():
    dto = CreateTaskDto.from_payload({"title": 123, "description": None})
    assert dto.title == ""
    assert dto.description == ""
    assert dto.validate().errors == [TITLE_REQUIRED, DESCRIPTION_REQUIRED]


def test_create_dto_from_payload_trims():
    dto = CreateTaskDto.from_payload({"title": " t ", "description": " d "})
    assert (dto.title, dto.description) == ("t", "d")


@pytest.mark.parametrize(
    "raw,expected",
    [("-123", -123), ("42", 42), ("  7", 7), ("12abc", 12), ("+3", 3), ("abc", None), ("", None), ("1.5", 1)],
)
def test_parse_int(raw: str, expected):
    assert parse_int(raw) == expected


def test_complete_dto_negative_string():
    dto = CompleteTaskDto("-123")
    assert dto.id == -123
    assert dto.validate().is_valid is False


def test_complete_dto_zero_is_invalid():
    assert CompleteTaskDto("0").validate().is_valid is False


def test_complete_dto_one_is_valid():
    result = CompleteTaskDto("1").validate()
    assert result.is_valid is True
    assert result.errors == []


def test_complete_dto_not_a_number():
    dto = CompleteTaskDto("abc")
    assert dto.id is None
    result = dto.validate()
    assert result.is_valid is False
    assert result.errors == ["Invalid task ID"]


@pytest.mark.parametrize("value", [1.5, float("nan"), float("inf"), -1, 0, True])
def test_complete_dto_rejects_non_positive_integers(value):
    assert CompleteTaskDto(value).validate().is_valid is False


@pytest.mark.parametrize("value", [1, 99, 2.0])
def test_complete_dto_accepts_positive_integers(value):
    assert CompleteTaskDto(value).validate().is_valid is True
