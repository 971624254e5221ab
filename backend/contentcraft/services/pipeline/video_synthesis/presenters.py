"""
Presenter lookup tables, keyed by target-audience label
"""

HEYGEN_AVATARS = {
    "Cardiologist": "Anna-headshot-20240205",
    "Oncologist": "Dave-headshot-20240205",
    "Neurologist": "Angela-inTshirt-20220820",
    "Pediatrician": "Ben-office-20220820",
    "Dermatologist": "Mark-office-20220820",
}
DEFAULT_HEYGEN_AVATAR = "Angela-inTshirt-20220820"

VEO_SPEAKERS = {
    "Cardiologist": "professional_male_1",
    "Oncologist": "professional_female_1",
    "Neurologist": "professional_male_2",
    "Pediatrician": "friendly_female_1",
    "Dermatologist": "professional_female_2",
}
DEFAULT_VEO_SPEAKER = "professional_male_1"
