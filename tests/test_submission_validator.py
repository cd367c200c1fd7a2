import pytest

from app.domain.exceptions import ValidationError
from app.domain.validation.submission_validator import (
    normalize_mobile_number,
    validate_cell_therapy_interest,
    validate_cell_therapy_update,
    validate_registration,
    validate_registration_update,
)


def fields_of(exc_info):
    return [err["field"] for err in exc_info.value.errors]


class TestRegistrationValidation:
    def test_valid_payload_is_normalised(self, registration_payload):
        registration_payload["email"] = "  John@Example.COM "
        registration_payload["fullName"] = "  John Smith "

        fields = validate_registration(registration_payload)

        assert fields["email"] == "john@example.com"
        assert fields["full_name"] == "John Smith"
        assert fields["consent"] is True
        assert fields["zip_code"] == "10001"

    @pytest.mark.parametrize("consent", [False, None, "true", 1, "yes"])
    def test_consent_must_be_literal_true(self, registration_payload, consent):
        registration_payload["consent"] = consent

        with pytest.raises(ValidationError) as exc_info:
            validate_registration(registration_payload)

        assert fields_of(exc_info) == ["consent"]

    def test_age_is_optional(self, registration_payload):
        del registration_payload["age"]
        assert validate_registration(registration_payload)["age"] is None

    def test_age_has_lower_bound_only(self, registration_payload):
        registration_payload["age"] = 17
        with pytest.raises(ValidationError):
            validate_registration(registration_payload)

        registration_payload["age"] = 130
        assert validate_registration(registration_payload)["age"] == 130

    def test_phone_only_needs_to_be_present(self, registration_payload):
        registration_payload["phone"] = "12"
        assert validate_registration(registration_payload)["phone"] == "12"

        registration_payload["phone"] = "   "
        with pytest.raises(ValidationError) as exc_info:
            validate_registration(registration_payload)
        assert fields_of(exc_info) == ["phone"]

    def test_all_violations_reported_together(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_registration({"fullName": " ", "email": "not-an-email", "consent": False})

        assert fields_of(exc_info) == ["fullName", "email", "phone", "consent"]
        assert exc_info.value.message == (
            "Full name is required, Please enter a valid email, "
            "Phone number is required, You must consent to participate"
        )

    def test_legacy_research_area_checked_against_enum(self, registration_payload):
        registration_payload["researchArea"] = "Oncology"
        assert validate_registration(registration_payload)["research_area"] == "Oncology"

        registration_payload["researchArea"] = "Astrology"
        with pytest.raises(ValidationError) as exc_info:
            validate_registration(registration_payload)
        assert fields_of(exc_info) == ["researchArea"]


@pytest.mark.parametrize("email", ["jane@example.com", "J.Doe+trials@mail.example.org", "a_b@x.io"])
def test_accepts_well_formed_emails(interest_payload, email):
    interest_payload["email"] = email
    assert validate_cell_therapy_interest(interest_payload)["email"] == email.lower()


@pytest.mark.parametrize("email", ["", "jane", "jane@example", "jane@@example.com", "jane@example.c", "ja ne@example.com"])
def test_rejects_malformed_emails(interest_payload, email):
    interest_payload["email"] = email
    with pytest.raises(ValidationError) as exc_info:
        validate_cell_therapy_interest(interest_payload)
    assert fields_of(exc_info) == ["email"]


class TestCellTherapyValidation:
    def test_mobile_number_is_stored_as_digits(self, interest_payload):
        fields = validate_cell_therapy_interest(interest_payload)
        assert fields["mobile_number"] == "5551234567"

    @pytest.mark.parametrize("mobile", ["555-1234", "1-555-123-4567", "phone", "555 123 456"])
    def test_mobile_number_needs_ten_digits(self, interest_payload, mobile):
        interest_payload["mobileNumber"] = mobile
        with pytest.raises(ValidationError) as exc_info:
            validate_cell_therapy_interest(interest_payload)
        assert fields_of(exc_info) == ["mobileNumber"]

    @pytest.mark.parametrize("age, ok", [(17, False), (18, True), (45, True), (120, True), (121, False)])
    def test_age_bounds(self, interest_payload, age, ok):
        interest_payload["age"] = age
        if ok:
            assert validate_cell_therapy_interest(interest_payload)["age"] == age
        else:
            with pytest.raises(ValidationError) as exc_info:
                validate_cell_therapy_interest(interest_payload)
            assert fields_of(exc_info) == ["age"]

    @pytest.mark.parametrize("age", [None, "", "forty", True, 45.7, 120.9, "45.7"])
    def test_age_required_and_numeric(self, interest_payload, age):
        interest_payload["age"] = age
        with pytest.raises(ValidationError):
            validate_cell_therapy_interest(interest_payload)

    def test_numeric_string_age_is_accepted(self, interest_payload):
        interest_payload["age"] = "45"
        assert validate_cell_therapy_interest(interest_payload)["age"] == 45

    def test_whole_float_age_is_accepted(self, interest_payload):
        interest_payload["age"] = 45.0
        assert validate_cell_therapy_interest(interest_payload)["age"] == 45

    @pytest.mark.parametrize("zip_code", ["9411", "941100", "94110-1234", "ABCDE"])
    def test_zip_code_needs_five_digits(self, interest_payload, zip_code):
        interest_payload["zipCode"] = zip_code
        with pytest.raises(ValidationError) as exc_info:
            validate_cell_therapy_interest(interest_payload)
        assert fields_of(exc_info) == ["zipCode"]

    def test_blank_trial_reference_becomes_null(self, interest_payload):
        interest_payload["trialNctId"] = "  "
        interest_payload["trialTitle"] = ""
        fields = validate_cell_therapy_interest(interest_payload)
        assert fields["trial_nct_id"] is None
        assert fields["trial_title"] is None

    def test_missing_everything(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_cell_therapy_interest({})
        assert fields_of(exc_info) == [
            "fullName",
            "email",
            "mobileNumber",
            "zipCode",
            "age",
            "currentDiagnosis",
            "currentHealthStatus",
        ]

    def test_over_long_trial_fields_are_field_errors(self, interest_payload):
        interest_payload["trialNctId"] = "NCT" + "0" * 30
        interest_payload["fullName"] = "J" * 151
        with pytest.raises(ValidationError) as exc_info:
            validate_cell_therapy_interest(interest_payload)
        assert fields_of(exc_info) == ["fullName", "trialNctId"]
        assert exc_info.value.errors[1]["message"] == "trialNctId must be at most 20 characters"

    def test_name_at_the_column_width_is_accepted(self, interest_payload):
        interest_payload["fullName"] = "J" * 150
        assert validate_cell_therapy_interest(interest_payload)["full_name"] == "J" * 150


def test_normalize_mobile_number():
    assert normalize_mobile_number("(555) 123-4567") == "5551234567"
    assert normalize_mobile_number(None) == ""


class TestUpdateValidation:
    def test_registration_update_is_sparse(self):
        assert validate_registration_update({"status": "reviewed"}) == {"status": "reviewed"}
        assert validate_registration_update({}) == {}

    def test_registration_update_rejects_cell_therapy_status(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_registration_update({"status": "eligible"})
        assert fields_of(exc_info) == ["status"]

    def test_cell_therapy_update(self):
        fields = validate_cell_therapy_update({"status": "contacted", "notes": "  called twice ", "emailSent": True})
        assert fields == {"status": "contacted", "notes": "called twice", "email_sent": True}

    def test_cell_therapy_update_rejects_unknown_status_and_flag(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_cell_therapy_update({"status": "approved", "emailSent": "yes"})
        assert fields_of(exc_info) == ["status", "emailSent"]
