"""Tests for colour_by_value.core.env — .env loading, walk-up logic and settings."""

import os
from pathlib import Path

import pytest
from colour_by_value.core.env import ENV_PREFIX, _find_dotenv, _parse_dotenv, load_env, setting


class TestParseDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('FOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('KEY="hello world"\nKEY2=\'single\'\n')
        assert _parse_dotenv(f) == {'KEY': 'hello world', 'KEY2': 'single'}

    def test_comments_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\nFOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_inline_comment_stripped(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('COLOUR_BY_VALUE_HASH=sha256  # faster on big sheets\n')
        assert _parse_dotenv(f) == {'COLOUR_BY_VALUE_HASH': 'sha256'}

    def test_hash_inside_quotes_kept(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('SHEET="Q1 #2"\n')
        assert _parse_dotenv(f) == {'SHEET': 'Q1 #2'}

    def test_export_prefix(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('export FOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_blank_lines_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('\nFOO=bar\n\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_no_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('NOEQUALS\nFOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_empty_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('FOO=\n')
        assert _parse_dotenv(f) == {'FOO': ''}


class TestFindDotenv:
    def test_finds_in_cwd(self, tmp_path: Path) -> None:
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(tmp_path) == dotenv.resolve()

    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(subdir) == dotenv.resolve()

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        # .env is above .git, so it belongs to another project
        parent = tmp_path / 'repo'
        parent.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (parent / '.git').mkdir()
        subdir = parent / 'src'
        subdir.mkdir()
        assert _find_dotenv(subdir) is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        # .git as a file (worktree)
        parent = tmp_path / 'repo'
        parent.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (parent / '.git').write_text('gitdir: ../somewhere\n')
        subdir = parent / 'src'
        subdir.mkdir()
        assert _find_dotenv(subdir) is None

    def test_env_beside_git_is_found(self, tmp_path: Path) -> None:
        (tmp_path / '.git').mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(tmp_path) == dotenv.resolve()


class TestLoadEnv:
    def test_explicit_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('CBV_TEST_VAR', '')
        monkeypatch.delenv('CBV_TEST_VAR')
        f = tmp_path / 'custom.env'
        f.write_text('CBV_TEST_VAR=from_file\n')
        assert load_env(str(f)) == f
        assert os.environ['CBV_TEST_VAR'] == 'from_file'

    def test_os_env_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('CBV_TEST_VAR', 'from_os')
        f = tmp_path / '.env'
        f.write_text('CBV_TEST_VAR=from_file\n')
        load_env(str(f))
        assert os.environ['CBV_TEST_VAR'] == 'from_os'

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        assert load_env(str(tmp_path / 'nope.env')) is None

    def test_walks_up_from_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('CBV_WALK_VAR', '')
        monkeypatch.delenv('CBV_WALK_VAR')
        (tmp_path / '.git').mkdir()
        (tmp_path / '.env').write_text('CBV_WALK_VAR=found\n')
        sub = tmp_path / 'a' / 'b'
        sub.mkdir(parents=True)
        monkeypatch.chdir(sub)
        assert load_env() == (tmp_path / '.env').resolve()
        assert os.environ['CBV_WALK_VAR'] == 'found'

    def test_nothing_to_load(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestSetting:
    def test_reads_prefixed_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_PREFIX + 'HASH', 'sha256')
        assert setting('HASH') == 'sha256'
        assert setting('hash') == 'sha256'

    def test_default_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(ENV_PREFIX + 'SHEET', raising=False)
        assert setting('SHEET') is None
        assert setting('SHEET', 'Sheet1') == 'Sheet1'

    def test_blank_counts_as_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_PREFIX + 'SHEET', '   ')
        assert setting('SHEET', 'Sheet1') == 'Sheet1'
