import os

import pytest

from dotx import config
from dotx.config import AppConfig, Dotfile, RepoConfig
from dotx.fs import Path


@pytest.fixture
def env(tmp_path, monkeypatch):
    base = os.path.realpath(tmp_path)
    home = os.path.join(base, "home")
    cfg_home = os.path.join(base, "cfg")
    data_home = os.path.join(base, "data")
    os.makedirs(home)
    monkeypatch.setenv("HOME", home)
    monkeypatch.setenv("XDG_CONFIG_HOME", cfg_home)
    monkeypatch.setenv("XDG_DATA_HOME", data_home)
    return {"home": home, "cfg": cfg_home, "data": data_home}


def test_paths_follow_xdg(env):
    assert config.app_dir_path() == os.path.join(env["cfg"], "dotx")
    assert config.app_config_file_path() == os.path.join(env["cfg"], "dotx", "config.yaml")
    assert config.repo_dir_path() == os.path.join(env["data"], "dotx", "dotfiles")
    assert config.repo_config_file_path() == os.path.join(
        env["data"], "dotx", "dotfiles", "dotx.yaml"
    )


def test_relative_xdg_value_is_ignored(env, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", "relative")
    assert config.app_dir_path() == os.path.join(env["home"], ".config", "dotx")


def test_load_defaults_and_creates_dirs(env):
    cfg = config.load()
    assert cfg.app == AppConfig()
    assert cfg.app.commit_message == "update dotfiles"
    assert cfg.app.verbose is False
    assert cfg.repo.dotfiles == []
    assert cfg.repo_path == config.repo_dir_path()
    assert os.path.isdir(config.app_dir_path())
    assert os.path.isdir(config.repo_dir_path())


def test_load_app_config_from_file(env):
    os.makedirs(config.app_dir_path())
    with open(config.app_config_file_path(), "w") as handle:
        handle.write("verbose: true\ncommitMessage: sync\ndeployOnPull: true\n")
    app = config.load_app_config()
    assert app.verbose is True
    assert app.commit_message == "sync"
    assert app.deploy_on_pull is True
    assert app.deploy_on_init is False


def test_invalid_app_config_keeps_defaults(env):
    os.makedirs(config.app_dir_path())
    with open(config.app_config_file_path(), "w") as handle:
        handle.write("verbose: [unclosed\n")
    assert config.load_app_config() == AppConfig()


def test_wrongly_typed_app_config_keeps_defaults(env):
    os.makedirs(config.app_dir_path())
    with open(config.app_config_file_path(), "w") as handle:
        handle.write("verbose: true\ncommitMessage: [a, b]\n")
    assert config.load_app_config() == AppConfig()


def test_load_repo_config_from_file(env):
    os.makedirs(config.repo_dir_path())
    with open(config.repo_config_file_path(), "w") as handle:
        handle.write("dotfiles:\n- source: /.bashrc\n  destination: $HOME/.bashrc\n")
    repo = config.load_repo_config()
    assert repo.dotfiles == [Dotfile(source="/.bashrc", destination="$HOME/.bashrc")]


def test_invalid_repo_config_is_empty(env):
    os.makedirs(config.repo_dir_path())
    with open(config.repo_config_file_path(), "w") as handle:
        handle.write("dotfiles: 5\n")
    assert config.load_repo_config().dotfiles == []


def test_write_dotfile_round_trip(env):
    repo = config.load_repo_config()
    source = Path(os.path.join(env["home"], ".bashrc"))
    dest = Path(os.path.join(config.repo_dir_path(), ".bashrc"))
    repo.write_dotfile(source, dest)

    expected = Dotfile(source=os.sep + ".bashrc", destination="$HOME" + os.sep + ".bashrc")
    assert repo.dotfiles == [expected]
    assert config.load_repo_config().dotfiles == [expected]


def test_dotfile_exists(env):
    repo = RepoConfig(dotfiles=[Dotfile(source="/.bashrc", destination="$HOME/.bashrc")])
    assert repo.dotfile_exists(Path(os.path.join(env["home"], ".bashrc")))
    assert not repo.dotfile_exists(Path(os.path.join(env["home"], ".zshrc")))


def test_yaml_round_trip():
    repo = RepoConfig(dotfiles=[Dotfile(source="/a", destination="$HOME/a")])
    import yaml

    assert RepoConfig.from_yaml(yaml.safe_load(repo.to_yaml())) == repo