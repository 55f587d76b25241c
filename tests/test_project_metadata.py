from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def test_package_metadata_does_not_ship_requirements_documents():
    pyproject = (ROOT / "pyproject.toml").read_text(encoding='utf-8')
    for document in ("SPEC_FULL.md", "spec.md", "DESIGN.md"):
        assert document not in pyproject
