import marketplace_github


def test_public_exports_are_importable() -> None:
    for name in marketplace_github.__all__:
        assert hasattr(marketplace_github, name), name


def test_version_is_set() -> None:
    assert marketplace_github.__version__ == "0.1.0"
