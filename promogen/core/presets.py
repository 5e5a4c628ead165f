# Fixed lookup tables for prompt assembly and voice selection.

PHOTO_CONCEPTS = {
    "Golden Hour Glow": "beautiful golden hour lighting, cinematic",
    "Retro Analog Film": "90s analog film aesthetic, grainy, vintage",
    "Cyberpunk Nightscape": "futuristic cyberpunk city at night, neon lights",
    "Cozy Coffee Shop": "warm and cozy coffee shop",
    "Nature Explorer": "beautiful natural landscape, forest",
    "Studio Minimalis": "clean minimalist studio background",
}
DEFAULT_PHOTO_CONCEPT = "Studio Minimalis"

MODEL_GENDERS = {
    "Pria": "man",
    "Wanita": "woman",
}

IMAGE_ATTEMPTS = 4

# Index i is appended to the base prompt of attempt i.
VARIATION_SUFFIXES = (
    "",
    " Use a different, natural pose than a standard front-facing stance.",
    " Shoot from a different camera angle as a medium shot.",
    " Give the model a different facial expression in a close-up shot.",
)

VOICES = {
    "male": {
        "voice_name": "Kore",
        "style": "Read this in a relaxed and confident tone in Indonesian",
    },
    "female": {
        "voice_name": "Puck",
        "style": "Read this in a gentle and energetic tone in Indonesian",
    },
}

SECTION_INSTRUCTIONS = {
    "DESKRIPSI_PRODUK": (
        "[Tulis deskripsi produk 3-4 kalimat yang menonjolkan bahan, keunggulan, "
        "dan siapa yang cocok memakainya.]"
    ),
    "CAPTION_TIKTOK": (
        '[Buat 2-3 kalimat caption. Mulai dengan "hook" yang bikin penasaran. '
        "Gunakan storytelling singkat tentang masalah yang teratasi oleh produk ini. "
        "Akhiri dengan Call-to-Action (CTA) yang kuat ke keranjang kuning. "
        "Wajib sertakan 3-5 emoji yang relevan dan 3 hashtag viral seperti "
        "#RacunTikTok #TikTokShop #FYP.]"
    ),
    "NARASI_PROMOSI": (
        "[Buat naskah voice over berdurasi sekitar 20 detik. Gaya bicara harus natural "
        'seperti sedang "spill" produk rahasia ke teman. Struktur: hook, 1-2 pain point, '
        "perkenalkan {product} sebagai solusi dengan 1-2 manfaat utama, ciptakan urgensi, "
        "tutup dengan CTA ke keranjang kuning.]"
    ),
    "PROMPT_VIDEO": (
        "[Tulis satu paragraf prompt video dalam bahasa Inggris untuk model text-to-video: "
        "subjek memakai {product}, gerakan kamera, pencahayaan, dan suasana, maksimal 60 kata.]"
    ),
}
GENERIC_SECTION_INSTRUCTION = "[Tulis isi bagian {section} untuk produk {product}.]"
