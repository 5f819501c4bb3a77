"""
Tests for configuration loading.
"""

import numpy as np
import pytest

from uapca import MultivariateNormal, UaPCA
from uapca.config import (
    ENV_VAR,
    UaPCAConfig,
    clear_config_cache,
    get_config,
    load_config,
    set_config,
)


@pytest.fixture(autouse=True)
def reset_config():
    clear_config_cache()
    yield
    clear_config_cache()


class TestLoadConfig:

    def test_defaults(self):
        config = load_config()
        assert config.default_scale == 1.0
        assert config.psd_tolerance == 1e-10
        assert config.symmetry_tolerance == 1e-8

    def test_overlay_file(self, tmp_path):
        path = tmp_path / 'uapca.yaml'
        path.write_text('psd_tolerance: 1.0e-6\n')

        config = load_config(path)
        assert config.psd_tolerance == 1e-6
        assert config.default_scale == 1.0

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text('')
        assert load_config(path) == load_config()

    def test_unknown_key(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text('tolerance: 1.0\n')
        with pytest.raises(ValueError):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / 'nope.yaml')

    def test_negative_tolerance(self):
        with pytest.raises(ValueError):
            UaPCAConfig(psd_tolerance=-1.0)


class TestActiveConfig:

    def test_env_var(self, tmp_path, monkeypatch):
        path = tmp_path / 'env.yaml'
        path.write_text('default_scale: 3.0\n')
        monkeypatch.setenv(ENV_VAR, str(path))

        assert get_config().default_scale == 3.0

    def test_default_scale_drives_fit(self):
        set_config(UaPCAConfig(default_scale=2.0))
        pca = UaPCA.fit([MultivariateNormal.standard(2)])

        np.testing.assert_allclose(pca.lengths, [4.0, 4.0], atol=1e-12)
        assert pca.scale == 2.0

    def test_explicit_scale_wins(self):
        set_config(UaPCAConfig(default_scale=2.0))
        pca = UaPCA.fit([MultivariateNormal.standard(2)], scale=1.0)
        np.testing.assert_allclose(pca.lengths, [1.0, 1.0], atol=1e-12)
