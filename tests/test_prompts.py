from promogen.core.presets import PHOTO_CONCEPTS
from promogen.services.prompts import (
    base_image_prompt,
    image_instruction,
    resolve_setting,
    section_instruction,
    text_prompt,
    variation_prompt,
)


def test_every_concept_resolves():
    for concept, description in PHOTO_CONCEPTS.items():
        assert resolve_setting(concept, None) == description


def test_custom_background_overrides_and_is_not_merged():
    assert resolve_setting("Cyberpunk Nightscape", "  pantai Bali  ") == "at pantai Bali"


def test_blank_custom_background_keeps_preset():
    assert resolve_setting("Nature Explorer", "   ") == PHOTO_CONCEPTS["Nature Explorer"]


def test_missing_concept_defaults_to_minimal_studio():
    assert resolve_setting(None, None) == PHOTO_CONCEPTS["Studio Minimalis"]


def test_unlisted_concept_defaults_to_minimal_studio():
    assert resolve_setting("Moon Base", None) == PHOTO_CONCEPTS["Studio Minimalis"]
    assert resolve_setting("", None) == PHOTO_CONCEPTS["Studio Minimalis"]


def test_gender_mapping():
    assert "Indonesian woman model" in base_image_prompt("Dress", "gaun", "Wanita", "x")
    assert "Indonesian man model" in base_image_prompt("Kemeja", "kemeja", "Pria", "x")
    assert "Indonesian woman model" in base_image_prompt("Kemeja", "kemeja", "pria", "x")


def test_first_attempt_has_no_suffix():
    assert variation_prompt("base.", 0) == "base."
    assert variation_prompt("base.", 3) != "base."


def test_instruction_without_face_mentions_no_ordering():
    text = image_instruction("desc", with_face=False)
    assert "FIRST" not in text
    assert text.endswith("desc")


def test_unknown_section_gets_generic_instruction():
    assert section_instruction("HASHTAGS", '"Kaos"') == '[Tulis isi bagian HASHTAGS untuk produk "Kaos".]'


def test_text_prompt_lists_sections_in_order():
    prompt = text_prompt("Kaos", None, ["NARASI_PROMOSI", "CAPTION_TIKTOK"])
    assert prompt.index("NARASI_PROMOSI:") < prompt.index("CAPTION_TIKTOK:")
    assert '"Kaos"' in prompt
