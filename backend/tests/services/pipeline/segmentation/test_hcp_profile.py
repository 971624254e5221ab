from contentcraft.services.pipeline.segmentation import HCPProfile, parse_hcp_profile


class TestParseHcpProfile:

    def test_all_labelled_fields(self):
        profile = parse_hcp_profile(
            "specialty: Oncology, prescription_rate: 0.55, practice_size: Large, years_experience: 12"
        )
        assert profile == HCPProfile(
            specialty="Oncology",
            prescription_rate=0.55,
            practice_size="Large",
            years_experience=12,
        )

    def test_field_names_are_case_insensitive(self):
        profile = parse_hcp_profile("Prescription_Rate: 0.3\nYEARS_EXPERIENCE: 4")
        assert profile.prescription_rate == 0.3
        assert profile.years_experience == 4

    def test_title_implies_specialty(self):
        assert parse_hcp_profile("Senior cardiologist at a city hospital").specialty == "Cardiology"
        assert parse_hcp_profile("Pediatrician, 3 clinics").specialty == "Pediatrics"

    def test_explicit_specialty_wins(self):
        assert parse_hcp_profile("Cardiologist, specialty: Oncology").specialty == "Oncology"

    def test_unparseable_rate_is_absent(self):
        assert parse_hcp_profile("prescription_rate: 0.5.5").prescription_rate is None

    def test_empty_text(self):
        assert parse_hcp_profile("") == HCPProfile()
        assert parse_hcp_profile(None) == HCPProfile()

    def test_free_text_without_fields(self):
        profile = parse_hcp_profile("General practitioner in a rural practice")
        assert profile.specialty is None
        assert profile.prescription_rate is None
        assert profile.years_experience is None
