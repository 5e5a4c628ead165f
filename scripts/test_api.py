# =============================================================================
# scripts/test_api.py — Quick API smoke test (run with backend on 127.0.0.1:8000)
# =============================================================================
# Usage: python scripts/test_api.py [path/to/product.jpg]
# Needs GOOGLE_API_KEY configured on the server for the generate checks.
# =============================================================================

import base64
import mimetypes
import os
import sys

try:
    import requests
except ImportError:
    print("Install requests: pip install requests")
    sys.exit(1)

BASE = os.environ.get("BASE_URL", "http://127.0.0.1:8000")
TIMEOUT = 5


def get(path: str) -> dict | None:
    try:
        r = requests.get(f"{BASE}{path}", timeout=TIMEOUT)
        r.raise_for_status()
        return r.json()
    except Exception as e:
        print(f"GET {path} failed: {e}")
        return None


def post(payload: dict) -> tuple[dict | None, int | None]:
    try:
        r = requests.post(f"{BASE}/api/generate", json=payload, timeout=300)
    except Exception as e:
        print(f"POST /api/generate failed: {e}")
        return None, None
    try:
        return r.json(), r.status_code
    except ValueError:
        print("Response:", r.text[:500])
        return None, r.status_code


def main() -> int:
    print("1. GET /health ...")
    h = get("/health")
    if not h:
        print("   Backend not reachable. Start with: python run.py")
        return 1
    print("   OK:", h.get("status"), "| providers:", h.get("providers"))

    print("2. POST /api/generate (unknown type) ...")
    out, status = post({"type": "video"})
    if status != 400:
        print("   Expected 400, got", status, out)
        return 1
    print("   OK: 400", out)

    print("3. POST /api/generate (text) ...")
    out, status = post({"type": "text", "productName": "Kemeja Linen Oversize"})
    if status != 200:
        print("   Failed:", status, out)
        return 1
    for key, value in out.items():
        print(f"   {key}: {(value or '')[:120]!r}")

    narrative = out.get("narrative")
    if narrative:
        print("4. POST /api/generate (audio) ...")
        out, status = post({"type": "audio", "narrative": narrative, "gender": "female"})
        if status != 200:
            print("   Failed:", status, out)
            return 1
        print("   OK: mimeType =", out.get("mimeType"), "| bytes(base64) =", len(out.get("audioData", "")))

    if len(sys.argv) > 1:
        path = sys.argv[1]
        mime = mimetypes.guess_type(path)[0] or "image/jpeg"
        with open(path, "rb") as f:
            data = base64.b64encode(f.read()).decode("utf-8")
        print("5. POST /api/generate (image) ...")
        out, status = post({
            "type": "image",
            "productName": "Kemeja Linen Oversize",
            "productType": "kemeja",
            "productImage": {"base64": data, "mimeType": mime},
            "photoConcept": "Golden Hour Glow",
            "modelGender": "Wanita",
        })
        if status != 200:
            print("   Failed:", status, out)
            return 1
        print("   OK: images =", len(out.get("images", [])), "| failedAttempts =", out.get("failedAttempts"))

    print("All checks passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
