"""Input Validator — ring payload rules and the field-keyed report."""

from rings_api.core.domain_types import Invalid, Valid
from rings_api.core.validate_input import validate_payload
from rings_api.schemas.ring import RingCreate, RingUpdate
from rings_api.schemas.user import UserCreate

IMAGE = "https://example.org/one-ring.jpg"


def _full(**overrides):
    body = {
        "name": "Nenya",
        "power": "Preservation",
        "bearer": "u-1",
        "forgedBy": "u-2",
        "image": IMAGE,
    }
    body.update(overrides)
    return body


def test_valid_create_payload():
    outcome = validate_payload(RingCreate, _full())
    assert isinstance(outcome, Valid)
    assert outcome.value.forged_by == "u-2"
    assert outcome.value.image == IMAGE


def test_missing_fields_all_reported():
    outcome = validate_payload(RingCreate, {"name": "", "power": "Some power"})
    assert isinstance(outcome, Invalid)
    assert outcome.errors == {
        "bearer": ["Required"],
        "forgedBy": ["Required"],
        "image": ["Required"],
    }


def test_none_body_reports_every_field():
    outcome = validate_payload(RingCreate, None)
    assert isinstance(outcome, Invalid)
    assert list(outcome.errors) == ["name", "power", "bearer", "forgedBy", "image"]
    assert all(v == ["Required"] for v in outcome.errors.values())


def test_wrong_types_reported():
    outcome = validate_payload(RingCreate, _full(name=42, bearer=None))
    assert isinstance(outcome, Invalid)
    assert outcome.errors == {"name": ["Expected string"], "bearer": ["Expected string"]}


def test_image_must_be_http_url():
    outcome = validate_payload(RingCreate, _full(image="ftp://example.org/x.png"))
    assert isinstance(outcome, Invalid)
    assert outcome.errors == {"image": ["Invalid url"]}


def test_image_string_kept_verbatim():
    outcome = validate_payload(RingCreate, _full(image="https://example.org"))
    assert isinstance(outcome, Valid)
    assert outcome.value.image == "https://example.org"


def test_non_object_body():
    outcome = validate_payload(RingCreate, ["name"])
    assert isinstance(outcome, Invalid)
    assert outcome.errors == {"body": ["Expected object"]}


def test_update_does_not_require_forged_by():
    body = _full()
    del body["forgedBy"]
    outcome = validate_payload(RingUpdate, body)
    assert isinstance(outcome, Valid)
    assert "forged_by" not in outcome.value.to_fields()


def test_update_ignores_forged_by():
    outcome = validate_payload(RingUpdate, _full(forgedBy="intruder"))
    assert isinstance(outcome, Valid)
    assert "forged_by" not in outcome.value.to_fields()


def test_update_requires_rest_of_shape():
    outcome = validate_payload(RingUpdate, {"name": "Updated Ring", "power": "New Power"})
    assert isinstance(outcome, Invalid)
    assert outcome.errors == {"bearer": ["Required"], "image": ["Required"]}


def test_user_class_reported_under_wire_name():
    outcome = validate_payload(UserCreate, {
        "username": "sam", "email": "sam@example.com", "password": "secret1",
    })
    assert isinstance(outcome, Invalid)
    assert outcome.errors == {"class": ["Required"]}


def test_overlong_user_ids_reported():
    outcome = validate_payload(RingCreate, _full(bearer="b" * 37, forgedBy="f" * 37))
    assert isinstance(outcome, Invalid)
    assert set(outcome.errors) == {"bearer", "forgedBy"}


def test_overlong_name_reported_on_update():
    body = _full(name="n" * 256)
    del body["forgedBy"]
    outcome = validate_payload(RingUpdate, body)
    assert isinstance(outcome, Invalid)
    assert list(outcome.errors) == ["name"]


def test_ids_at_column_width_accepted():
    uuid_like = "d590641f-9976-4928-ba25-e1e0e2f66da8"
    outcome = validate_payload(RingCreate, _full(bearer=uuid_like, forgedBy=uuid_like, name="n" * 255))
    assert isinstance(outcome, Valid)
