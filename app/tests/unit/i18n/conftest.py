"""Feature-level fixtures for i18n system tests."""

import pytest
import yaml

from adminkit.i18n import YAMLTranslationLoader


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML catalog files.

    Returns a directory structure like:
    - messages.yml          (root catalog)
    - user.en-US.yml
    - user.en.yml
    - user.zh-CN.yml
    - enums.en-US.yml
    """
    root = {
        "common": {"ok": "OK (root)", "footer": "Powered by adminkit"},
    }
    with open(tmp_path / "messages.yml", "w", encoding="utf-8") as f:
        yaml.dump(root, f, allow_unicode=True)

    en_us_user = {
        "user": {
            "created": "User {} created",
            "nickname_taken": "Nickname '{}' is already taken, do you like '{}'?",
            "blank": "",
        },
        "common": {"ok": "OK"},
    }
    with open(tmp_path / "user.en-US.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_us_user, f, allow_unicode=True)

    en_user = {
        "user": {
            "created": "User {} created (en)",
            "language_only": "Only in en",
        }
    }
    with open(tmp_path / "user.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_user, f, allow_unicode=True)

    zh_cn_user = {
        "user": {
            "created": "用户 {} 已创建",
        }
    }
    with open(tmp_path / "user.zh-CN.yml", "w", encoding="utf-8") as f:
        yaml.dump(zh_cn_user, f, allow_unicode=True)

    en_us_enums = {
        "UserType": {"ADMIN": "Administrator"},
        "MEMBER": "Member (shared)",
    }
    with open(tmp_path / "enums.en-US.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_us_enums, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=True)
