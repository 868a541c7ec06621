"""
Example script demonstrating how to use the File Download API.
"""

import requests
from pathlib import Path

# API base URL
BASE_URL = "http://localhost:8000"
OUTPUT_DIR = Path("downloads")


def check_health():
    """Show which files the server can currently serve."""
    print("Checking service health...")

    response = requests.get(f"{BASE_URL}/health")

    if response.status_code == 200:
        for entry in response.json()["files"]:
            mark = "✓" if entry["available"] else "✗"
            print(f"  {mark} {entry['type']}: {entry['filename']}")
    else:
        print(f"✗ Health check failed: {response.status_code}")

    return response


def download(file_type: str):
    """Download a file by type and save it under OUTPUT_DIR."""
    print(f"\nDownloading type={file_type}...")

    with requests.get(f"{BASE_URL}/download", params={"type": file_type}, stream=True) as response:
        if response.status_code != 200:
            print(f"✗ Error downloading: {response.status_code}")
            print(f"  {response.text}")
            return response

        # Content-Disposition: attachment; filename="ejemplo.pdf"
        disposition = response.headers.get("Content-Disposition", "")
        filename = disposition.split("filename=")[-1].strip('"') or f"download.{file_type}"

        OUTPUT_DIR.mkdir(exist_ok=True)
        output_path = OUTPUT_DIR / filename
        with open(output_path, "wb") as f:
            for chunk in response.iter_content(chunk_size=4096):
                f.write(chunk)

    print("✓ Download completed!")
    print(f"  Content-Type: {response.headers.get('Content-Type')}")
    print(f"  Saved to: {output_path} ({output_path.stat().st_size} bytes)")
    return response


def main():
    """Run example usage."""
    print("=" * 60)
    print("File Download API - Example Usage")
    print("=" * 60)

    check_health()
    download("pdf")
    download("excel")

    # Unknown types are rejected with 400
    download("word")


if __name__ == "__main__":
    main()
