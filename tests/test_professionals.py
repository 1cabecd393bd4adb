import pytest

from clinic_registry.core.errors import ClinicException, ErrorKind
from clinic_registry.models.professional import (
    ProfessionalKind, format_professional_info, get_service_description,
    new_general_practitioner, new_pediatrician, new_professional,
    update_professional
)

@pytest.fixture
def gp():
    return new_general_practitioner(
        1, "Dr. Sarah Johnson", 8, "Community General Practice", True
    ).unwrap()

@pytest.fixture
def pediatrician():
    return new_pediatrician(
        3, "Dr. Emily Rodriguez", 6, "Pediatric Respiratory Medicine", 12
    ).unwrap()

class TestProfessionalValidation:

    @pytest.mark.parametrize("bad_id", [0, -1, -100])
    def test_non_positive_id_rejected(self, bad_id):
        """Test ids at or below zero are out of range."""
        result = new_general_practitioner(bad_id, "Dr. A", 1, "Family Medicine", False)
        assert not result.ok
        assert result.error.kind == ErrorKind.OUT_OF_RANGE
        assert result.error.field == "id"

    @pytest.mark.parametrize("good_id", [1, 2, 999])
    def test_positive_id_accepted(self, good_id):
        result = new_pediatrician(good_id, "Dr. A", 1, "Pediatrics", 10)
        assert result.ok
        assert result.value.id == good_id

    @pytest.mark.parametrize("blank", [None, "", "   ", "\t"])
    def test_blank_name_rejected(self, blank):
        result = new_pediatrician(1, blank, 1, "Pediatrics", 10)
        assert result.error.kind == ErrorKind.EMPTY_FIELD
        assert result.error.field == "name"

    @pytest.mark.parametrize("blank", [None, "", "  "])
    def test_blank_specialty_rejected(self, blank):
        """Test both variants require a specialty."""
        gp_result = new_general_practitioner(1, "Dr. A", 1, blank, True)
        ped_result = new_pediatrician(2, "Dr. B", 1, blank, 10)
        assert gp_result.error.kind == ErrorKind.EMPTY_FIELD
        assert ped_result.error.kind == ErrorKind.EMPTY_FIELD
        assert gp_result.error.field == ped_result.error.field == "specialty"

    def test_negative_work_experience_rejected(self):
        result = new_general_practitioner(1, "Dr. A", -1, "Family Medicine", False)
        assert result.error.kind == ErrorKind.OUT_OF_RANGE
        assert result.error.field == "work_experience"

    @pytest.mark.parametrize("field", ["id", "work_experience", "max_age"])
    def test_bool_not_accepted_as_integer(self, field):
        """Test True is not taken for the integer 1."""
        values = {"id": 3, "work_experience": 2, "max_age": 10}
        values[field] = True

        result = new_pediatrician(values["id"], "Dr. B", values["work_experience"], "Pediatrics", values["max_age"])
        assert result.error.kind == ErrorKind.OUT_OF_RANGE
        assert result.error.field == field

    def test_unknown_practice_type(self):
        with pytest.raises(TypeError):
            new_professional(1, "Dr. A", 1, object())

    def test_zero_work_experience_accepted(self):
        assert new_general_practitioner(1, "Dr. A", 0, "Family Medicine", False).ok

    @pytest.mark.parametrize("max_age", [0, -3, 19, 40])
    def test_max_age_out_of_range(self, max_age):
        result = new_pediatrician(3, "Dr. B", 2, "Pediatrics", max_age)
        assert result.error.kind == ErrorKind.OUT_OF_RANGE
        assert result.error.field == "max_age"

    @pytest.mark.parametrize("max_age", [1, 18])
    def test_max_age_boundaries_accepted(self, max_age):
        result = new_pediatrician(3, "Dr. B", 2, "Pediatrics", max_age)
        assert result.ok
        assert result.value.practice.max_age == max_age

    def test_first_failure_wins(self):
        """Test the id is checked before the name."""
        result = new_general_practitioner(0, "", -1, "", False)
        assert result.error.field == "id"

    def test_unwrap_raises_on_error(self):
        with pytest.raises(ClinicException) as exc_info:
            new_pediatrician(1, "Dr. B", 2, "Pediatrics", 30).unwrap()
        assert exc_info.value.kind == ErrorKind.OUT_OF_RANGE

class TestProfessionalUpdate:

    def test_update_returns_new_copy(self, gp):
        result = update_professional(gp, name="Dr. Sarah J.", accepts_children=False)
        assert result.ok
        assert result.value.name == "Dr. Sarah J."
        assert result.value.practice.accepts_children is False
        assert gp.name == "Dr. Sarah Johnson"

    def test_update_to_invalid_id_fails(self, gp):
        result = update_professional(gp, id=0)
        assert result.error.kind == ErrorKind.OUT_OF_RANGE

    def test_update_max_age_revalidated(self, pediatrician):
        assert update_professional(pediatrician, max_age=19).error.kind == ErrorKind.OUT_OF_RANGE
        assert update_professional(pediatrician, max_age=18).value.practice.max_age == 18

    def test_update_unknown_field(self, gp):
        with pytest.raises(TypeError):
            update_professional(gp, max_age=10)

class TestServiceDescription:

    def test_gp_accepting_children(self, gp):
        description = get_service_description(gp)
        assert description.endswith(
            "general disease diagnosis, chronic disease management, health check-ups"
            ", and can treat children under 14 years old"
        )

    def test_gp_not_accepting_children(self):
        gp = new_general_practitioner(2, "Dr. Michael Chen", 5, "Family Medicine", False).unwrap()
        description = get_service_description(gp)
        assert description.endswith("health check-ups")
        assert "children" not in description

    def test_pediatrician_uses_max_age(self, pediatrician):
        assert get_service_description(pediatrician).endswith(
            "diagnosis of common illnesses, vaccination guidance, "
            "and growth assessment for children under 12 years old"
        )

    def test_kind(self, gp, pediatrician):
        assert gp.kind == ProfessionalKind.GENERAL_PRACTITIONER
        assert pediatrician.kind == ProfessionalKind.PEDIATRICIAN

class TestProfessionalReport:

    def test_gp_report(self, gp):
        lines = format_professional_info(gp).splitlines()
        assert "ID: 1 | Name: Dr. Sarah Johnson" in lines
        assert "Specialty: Community General Practice | Accepts Children: Yes" in lines
        assert lines[-1] == (
            "[General Practice Service Scope]: " + get_service_description(gp)
            + ", Work Experience: 8 years"
        )

    def test_gp_report_no_children(self):
        gp = new_general_practitioner(2, "Dr. Michael Chen", 5, "Family Medicine", False).unwrap()
        assert "Specialty: Family Medicine | Accepts Children: No" in format_professional_info(gp)

    def test_pediatrician_report(self, pediatrician):
        lines = format_professional_info(pediatrician).splitlines()
        assert "ID: 3 | Name: Dr. Emily Rodriguez" in lines
        assert "Specialty: Pediatric Respiratory Medicine | Maximum Patient Age: 12 years" in lines
        assert lines[-1].startswith("[Pediatric Service Scope]: ")
        assert lines[-1].endswith(", Work Experience: 6 years")
