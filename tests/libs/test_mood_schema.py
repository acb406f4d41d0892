import pytest

from moodlog.libs.errors import EntryValidationError
from moodlog.libs.schemas.mood import CANONICAL_MOODS, validate_insert_payload


def test_minimal_payload_is_accepted():
    entry = validate_insert_payload({"mood": "Happy", "emoji": "😊"})
    assert entry.mood == "Happy"
    assert entry.emoji == "😊"
    assert entry.name is None
    assert entry.note is None


def test_optional_fields_pass_through_unchanged():
    entry = validate_insert_payload({"mood": "Sad", "emoji": "😢", "name": " Sam ", "note": "  rainy  "})
    assert entry.name == " Sam "
    assert entry.note == "  rainy  "


def test_unknown_keys_are_dropped():
    entry = validate_insert_payload({"mood": "Calm", "emoji": "😌", "id": "forged", "createdAt": "x"})
    assert "id" not in entry.model_dump()


@pytest.mark.parametrize(
    "payload, fields",
    [
        ({"emoji": "😊"}, ["mood"]),
        ({"mood": "Happy"}, ["emoji"]),
        ({}, ["mood", "emoji"]),
        ({"mood": "   ", "emoji": "😊"}, ["mood"]),
        ({"mood": "Happy", "emoji": ""}, ["emoji"]),
        ({"mood": "Happy", "emoji": "😊", "note": 42}, ["note"]),
        ({"mood": 3, "emoji": "😊"}, ["mood"]),
        (["Happy", "😊"], ["body"]),
        (None, ["body"]),
    ],
)
def test_invalid_payloads_name_offending_fields(payload, fields):
    with pytest.raises(EntryValidationError) as excinfo:
        validate_insert_payload(payload)
    assert excinfo.value.fields == fields
    for field in fields:
        assert field in excinfo.value.message


def test_canonical_moods_cover_the_picker():
    assert len(CANONICAL_MOODS) == 12
    assert CANONICAL_MOODS["Calm"] == "😌"


def test_padded_mood_and_emoji_are_kept_verbatim():
    entry = validate_insert_payload({"mood": " Happy ", "emoji": "😊 "})
    assert entry.mood == " Happy "
    assert entry.emoji == "😊 "
