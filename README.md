# dotx

dotx manages your dotfiles. It moves configuration files and directories into
a single dotfiles directory, leaves symbolic links in their original places,
and can later recreate those links on any machine from the recorded list.

## Installation

```
pip install .
```

This installs the `dotx` command. For running the tests, install the `test`
extra: `pip install .[test]`.

## Usage

### Track a file or directory

```
dotx add ~/.bashrc
dotx add ~/.bashrc ~/.config/nvim
```

Each path is moved into the dotfiles directory under its own name, a symlink
pointing to the new location is left in its place, and an entry is appended
to `dotx.yaml`. If the path is already recorded as a destination, or a file of
the same name is already in the dotfiles directory, dotx reports an error and
stops.

### Deploy tracked dotfiles

```
dotx deploy
dotx deploy --force
```

For every entry in `dotx.yaml`, dotx creates a symlink at the recorded
destination pointing into the dotfiles directory, creating missing parent
directories first. Links that already point at the right file are left alone.
If something else exists at a destination you are asked on the terminal
(`[y/N]`, default no) whether to overwrite it; `-f` / `--force` skips the
question and replaces it.

### Other options

- `-v` / `--verbose` turns on debug output.
- `--version` prints the version.
- Running `dotx` without a command prints the help.

Messages are written to standard error. Any error ends the command with exit
status 1.

## Files

- `$XDG_CONFIG_HOME/dotx/config.yaml` holds the application settings. All
  keys are optional:

  ```yaml
  verbose: false
  commitMessage: update dotfiles
  deployOnInit: false
  deployOnPull: false
  ```

  `verbose` sets the default of `--verbose`. The other three keys are read
  and checked but not used by any command (see below).

- `$XDG_DATA_HOME/dotx/dotfiles/` is the dotfiles directory.
- `$XDG_DATA_HOME/dotx/dotfiles/dotx.yaml` lists the tracked dotfiles. For
  each entry, `source` is its path inside the dotfiles directory and
  `destination` is where the link goes. Paths under the home directory are
  written with `$HOME`; environment variables in paths are expanded when they
  are read, so the list works on other machines too.

If the XDG variables are unset or not absolute, `~/.config` and
`~/.local/share` are used. Both directories are created when dotx starts.
An unreadable or invalid settings file produces a warning and the defaults
are used.

## What dotx does not do

dotx works only on the local file system. It does not clone, pull, commit or
push the dotfiles directory; to share it between machines, put it under
version control and synchronise it yourself, then run `dotx deploy`.

## Library use

The modules can be used on their own:

- `dotx.fs` — `Path` (an absolute, normalised path with `filename()`,
  `dir()`, `exists()`, `is_dir()`, `is_symlink()`, `symlink_path()`,
  `has_subfiles()`), and `move`, `symlink`, `mkdir`, `delete`, which raise
  `FsError` when their preconditions fail.
- `dotx.config` — `load()`, `AppConfig`, `RepoConfig`, `Dotfile`, `Config`
  and the path helpers `app_dir_path()`, `repo_dir_path()` and friends.
- `dotx.cli` — `run_add(cfg, path)`, `run_deploy(cfg, force)`,
  `build_parser(cfg, version)` and `main(argv=None)`.
- `dotx.logger` and `dotx.tui` — the logging and yes/no prompt used by the
  commands.

```python
from dotx import config, fs

cfg = config.load()
for dotfile in cfg.repo.dotfiles:
    print(dotfile.destination, fs.Path(dotfile.destination).is_symlink())
```