import pytest

from balikobot import BadRequestError, Client, FailureReason
from balikobot.envelope import ResponseEnvelope


def test_from_body_splits_metadata_and_packages():
    envelope = ResponseEnvelope.from_body(
        {"status": 200, "labels_url": "https://labels", "0": {"status": 200}, "extra": 1}
    )

    assert envelope.status == 200
    assert envelope.has_status is True
    assert envelope.labels_url == "https://labels"
    assert envelope.packages == {0: {"status": 200}}


def test_from_body_without_status():
    envelope = ResponseEnvelope.from_body({"0": {"status": 200}})

    assert envelope.has_status is False
    assert envelope.status is None


@pytest.mark.parametrize("body", [None, "", [], "not json"])
def test_from_body_non_mapping_is_empty(body):
    envelope = ResponseEnvelope.from_body(body)

    assert envelope.has_status is False
    assert envelope.packages == {}
    assert envelope.raw == {}


def test_non_numeric_status_is_rejected():
    envelope = ResponseEnvelope.from_body({"status": "OK", 0: {"status": 200}})

    with pytest.raises(BadRequestError) as excinfo:
        envelope.validate(1)

    assert excinfo.value.reason is FailureReason.BAD_STATUS
    assert "'OK'" in str(excinfo.value)


def test_gap_in_indices_is_missing_data():
    envelope = ResponseEnvelope.from_body({"status": 200, 0: {"status": 200}, 2: {"status": 200}})

    with pytest.raises(BadRequestError) as excinfo:
        envelope.validate(2)

    assert excinfo.value.reason is FailureReason.MISSING_PACKAGE_DATA


def test_non_mapping_entry_is_missing_data():
    envelope = ResponseEnvelope.from_body({"status": 200, 0: "200"})

    with pytest.raises(BadRequestError) as excinfo:
        envelope.validate(1)

    assert excinfo.value.reason is FailureReason.MISSING_PACKAGE_DATA


def test_empty_batch_with_ok_status_is_valid():
    envelope = ResponseEnvelope.from_body({"status": 200})

    envelope.validate(0)

    assert envelope.package_results() == []


def test_package_results_are_ordered_by_index():
    envelope = ResponseEnvelope.from_body(
        {"status": 200, "10": {"status": 200, "n": 10}, "2": {"status": 200, "n": 2}}
    )

    assert [entry["n"] for entry in envelope.package_results()] == [2, 10]


def test_unicode_digit_key_is_not_a_package_index():
    envelope = ResponseEnvelope.from_body(
        {"status": 200, "²": {"status": 200}, "0": {"status": 200, "package_id": "1"}}
    )

    assert envelope.packages == {0: {"status": 200, "package_id": "1"}}
    envelope.validate(1)


def test_unicode_digit_key_through_client(make_requester):
    client = Client(make_requester(200, {"status": 200, "²": {"status": 200}}))

    with pytest.raises(BadRequestError) as excinfo:
        client.add_packages("cp", [{"eid": 1}])

    assert excinfo.value.reason is FailureReason.WRONG_PACKAGE_COUNT


@pytest.mark.parametrize("status", [200.7, "200.0", "2OO", float("nan")])
def test_non_integral_aggregate_status_is_rejected(status):
    envelope = ResponseEnvelope.from_body({"status": status, 0: {"status": 200, "package_id": "1"}})

    with pytest.raises(BadRequestError) as excinfo:
        envelope.validate(1)

    assert excinfo.value.reason is FailureReason.BAD_STATUS


def test_integral_float_status_is_accepted():
    envelope = ResponseEnvelope.from_body({"status": 200.0, 0: {"status": 200.0, "package_id": "1"}})

    envelope.validate(1)

    assert envelope.status == 200


def test_rejected_package_reports_its_own_status():
    envelope = ResponseEnvelope.from_body(
        {"status": 200, 0: {"status": 406, "errors": {"rec_zip": "406"}}}
    )

    with pytest.raises(BadRequestError) as excinfo:
        envelope.validate(1)

    assert excinfo.value.reason is FailureReason.PACKAGE_STATUS
    assert excinfo.value.status_code == 406
    assert excinfo.value.errors == {0: {"status": 406, "errors": {"rec_zip": "406"}}}
