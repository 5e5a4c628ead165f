# -----------------------------------------------------------------------------
# promogen/services/prompts.py — Prompt assembly for image, text and audio
# -----------------------------------------------------------------------------

from promogen.core.presets import (
    DEFAULT_PHOTO_CONCEPT,
    GENERIC_SECTION_INSTRUCTION,
    MODEL_GENDERS,
    PHOTO_CONCEPTS,
    SECTION_INSTRUCTIONS,
    VARIATION_SUFFIXES,
)


def resolve_setting(photo_concept: str | None, custom_background: str | None) -> str:
    """Scene description; a custom background replaces the preset outright."""
    if custom_background and custom_background.strip():
        return f"at {custom_background.strip()}"
    return PHOTO_CONCEPTS.get(photo_concept or DEFAULT_PHOTO_CONCEPT, PHOTO_CONCEPTS[DEFAULT_PHOTO_CONCEPT])


def base_image_prompt(
    product_name: str,
    product_type: str,
    model_gender: str,
    setting: str,
) -> str:
    subject = MODEL_GENDERS.get(model_gender, "woman")
    return (
        "A magazine-quality fashion photograph, 9:16 aspect ratio, of an attractive "
        f"Indonesian {subject} model. The model is wearing a stylish {product_name} "
        f"({product_type}). The setting is {setting}. High detail, sharp focus, "
        "professional photography."
    )


def variation_prompt(base_prompt: str, index: int) -> str:
    return base_prompt + VARIATION_SUFFIXES[index]


def image_instruction(description: str, with_face: bool) -> str:
    if with_face:
        return (
            "CRITICAL PRIORITY: Use the face from the FIRST provided image (face reference) "
            "and accurately place it onto the model. Face identity takes priority over "
            "product placement. SECOND, dress the model in the product from the SECOND "
            "provided image (product image). The final image should follow this "
            f"description: {description}"
        )
    return (
        "The model in the photo must be wearing the product from the provided image. "
        f"The final image should follow this description: {description}"
    )


def section_instruction(section: str, product: str) -> str:
    template = SECTION_INSTRUCTIONS.get(section, GENERIC_SECTION_INSTRUCTION)
    return template.format(section=section, product=product)


def text_prompt(product_name: str, product_type: str | None, sections: list[str]) -> str:
    product = f'"{product_name}"'
    if product_type:
        product = f"{product} ({product_type})"
    blocks = "\n\n".join(f"{name}:\n{section_instruction(name, product)}" for name in sections)
    return (
        "Anda adalah seorang content creator TikTok dan affiliate marketer profesional dari "
        f"Indonesia. Tugas Anda adalah membuat konten viral untuk produk bernama {product}. "
        "Bahasa yang digunakan harus 100% Bahasa Indonesia gaul, kasual, dan sangat persuasif.\n\n"
        "IKUTI FORMAT INI DENGAN TEPAT, tulis setiap judul bagian persis seperti di bawah "
        "diikuti titik dua:\n\n"
        f"{blocks}\n"
    )


def audio_prompt(style: str, narrative: str) -> str:
    return f"{style}: {narrative}"
