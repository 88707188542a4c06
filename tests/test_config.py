from sketchauth.config import Config
from sketchauth.core.fingerprint import Profile


def test_defaults_are_written_on_first_run(tmp_path):
    config = Config(app_dir=tmp_path)
    assert config.config_file_path.exists()
    assert config.threshold == 18.0
    assert config.profile == Profile(200.0, 64)
    assert config.min_save_points == 8
    assert config.min_verify_points == 3
    assert config.template_key == "sketch_template_v1"
    assert config.template_dir == tmp_path / "templates"
    assert config.show_overlay is True
    assert config.replay_interval_ms == 16
    assert config.overlay_fill == 0.6


def test_file_values_override_defaults(tmp_path):
    (tmp_path / "config.ini").write_text(
        "[Matching]\nthreshold = 25\nresample_count = 32\n\n[Display]\nshow_overlay = no\n"
    )
    config = Config(app_dir=tmp_path)
    assert config.threshold == 25.0
    assert config.profile == Profile(200.0, 32)
    assert config.show_overlay is False
    assert config.min_save_points == 8


def test_written_file_is_read_back(tmp_path):
    Config(app_dir=tmp_path)
    text = (tmp_path / "config.ini").read_text()
    assert "[Matching]" in text
    assert Config(app_dir=tmp_path).resample_count == 64
