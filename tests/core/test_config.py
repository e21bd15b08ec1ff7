# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for configuration system."""

import os
from dataclasses import dataclass
from pathlib import Path

import pytest

from simplecache.config.properties.cache import CacheOptions
from simplecache.core.config import Config, config_properties


class TestConfig:
    def test_load_from_dict(self):
        config = Config({"simplecache": {"cache": {"provider": "file"}}})
        assert config.get("simplecache.cache.provider") == "file"

    def test_get_with_default(self):
        config = Config({})
        assert config.get("missing.key", "default") == "default"

    def test_get_nested_value(self):
        config = Config({"database": {"pool": {"size": 10}}})
        assert config.get("database.pool.size") == 10

    def test_load_from_yaml_file(self, tmp_path: Path):
        config_file = tmp_path / "cache.yaml"
        config_file.write_text("simplecache:\n  cache:\n    session_key: sess\n")
        config = Config.from_file(config_file)
        assert config.get("simplecache.cache.session_key") == "sess"
        assert config.loaded_sources == [str(config_file)]

    def test_load_from_toml_file(self, tmp_path: Path):
        config_file = tmp_path / "cache.toml"
        config_file.write_text('[simplecache.cache]\nprovider = "memory"\n')
        assert Config.from_file(config_file).get("simplecache.cache.provider") == "memory"

    def test_missing_file_is_empty(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.to_dict() == {}
        assert config.loaded_sources == []

    def test_env_var_override(self):
        os.environ["SIMPLECACHE_CACHE_PROVIDER"] = "redis"
        try:
            config = Config({"simplecache": {"cache": {"provider": "memory"}}})
            assert config.get("simplecache.cache.provider") == "redis"
        finally:
            del os.environ["SIMPLECACHE_CACHE_PROVIDER"]

    def test_placeholder_from_config(self):
        config = Config({"paths": {"root": "/var/cache"}, "simplecache": {"cache": {"file_storage": "${paths.root}/app"}}})
        assert config.get("simplecache.cache.file_storage") == "/var/cache/app"

    def test_placeholder_default(self):
        config = Config({"value": "${UNSET_SIMPLECACHE_VAR:fallback}"})
        assert config.get("value") == "fallback"

    def test_unresolvable_placeholder_raises(self):
        config = Config({"value": "${UNSET_SIMPLECACHE_VAR}"})
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            config.get("value")

    def test_circular_placeholder_raises(self):
        config = Config({"a": "${b}", "b": "${a}"})
        with pytest.raises(ValueError, match="Max recursion depth"):
            config.get("a")


class TestConfigSources:
    def test_merges_config_dir_root_and_profile(self, tmp_path: Path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "simplecache.yaml").write_text(
            "simplecache:\n  cache:\n    provider: file\n    session_key: base\n"
        )
        (tmp_path / "simplecache.yaml").write_text("simplecache:\n  cache:\n    session_key: root\n")
        (tmp_path / "simplecache-dev.yaml").write_text("simplecache:\n  cache:\n    provider: memory\n")

        config = Config.from_sources(tmp_path, active_profiles=["dev"])
        assert config.get("simplecache.cache.provider") == "memory"
        assert config.get("simplecache.cache.session_key") == "root"
        assert len(config.loaded_sources) == 3


class TestConfigProperties:
    def test_bind_cache_options(self):
        config = Config({"simplecache": {"cache": {"provider": "session", "session_key": "s"}}})
        options = config.bind(CacheOptions)
        assert options.provider == "session"
        assert options.session_key == "s"
        assert options.file_storage == ""

    def test_bind_uses_defaults(self):
        assert Config({}).bind(CacheOptions) == CacheOptions()

    def test_bind_coerces_env_strings(self, monkeypatch):
        @config_properties(prefix="app.pool")
        @dataclass
        class PoolConfig:
            size: int = 5
            enabled: bool = False

        monkeypatch.setenv("SIMPLECACHE_APP_POOL_SIZE", "20")
        monkeypatch.setenv("SIMPLECACHE_APP_POOL_ENABLED", "yes")
        pool = Config({}).bind(PoolConfig)
        assert pool.size == 20
        assert pool.enabled is True

    def test_bind_requires_decorator(self):
        @dataclass
        class Plain:
            x: int = 1

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)

    def test_options_are_immutable(self):
        options = CacheOptions()
        with pytest.raises(AttributeError):
            options.provider = "file"  # type: ignore[misc]
