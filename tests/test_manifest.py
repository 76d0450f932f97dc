import json

from actionskit.manifest import ToolRelease, ToolReleaseFile

SAMPLE = {
    "version": "3.12.1",
    "stable": True,
    "release_url": "https://example.com/releases/3.12.1",
    "files": [
        {
            "filename": "tool-3.12.1-linux-x64.tar.gz",
            "platform": "linux",
            "platform_version": "22.04",
            "arch": "x64",
            "download_url": "https://example.com/tool-3.12.1-linux-x64.tar.gz",
        },
        {
            "filename": "tool-3.12.1-darwin-arm64.tar.gz",
            "platform": "darwin",
            "arch": "arm64",
            "download_url": "https://example.com/tool-3.12.1-darwin-arm64.tar.gz",
        },
    ],
}


def test_release_round_trip():
    release = ToolRelease.from_dict(SAMPLE)
    assert release.to_dict() == SAMPLE


def test_release_fields_parsed():
    release = ToolRelease.from_dict(SAMPLE)
    assert release.version == SAMPLE["version"]
    assert release.stable is True
    assert len(release.files) == 2
    assert release.files[0].platform_version == "22.04"
    assert release.files[1].platform_version is None


def test_unset_platform_version_is_omitted():
    item = ToolReleaseFile.from_dict(SAMPLE["files"][1])
    assert "platform_version" not in item.to_dict()


def test_file_round_trip_through_json():
    item = ToolReleaseFile.from_dict(SAMPLE["files"][0])
    again = ToolReleaseFile.from_dict(json.loads(json.dumps(item.to_dict())))
    assert again == item


def test_missing_keys_take_zero_values():
    release = ToolRelease.from_dict({})
    assert release == ToolRelease()
    assert release.files == []
    assert release.stable is False


def test_null_files_become_empty_list():
    release = ToolRelease.from_dict({"version": "1.0.0", "files": None})
    assert release.files == []
    assert release.to_dict()["files"] == []