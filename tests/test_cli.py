"""Unit tests for the create-hana command line (hana.cli).

Tests cover:
- Flag parsing and answer collection (flags override the answers file)
- --dry-run lists files without writing
- Exit code 1 on invalid option combinations and existing directories
- A successful run writes the project
"""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, patch

import pytest

from hana.cli import build_parser, collect_answers, main
from hana.config import resolve_config
from hana.utils import CommandResult


def _succeeding() -> AsyncMock:
    return AsyncMock(return_value=CommandResult(0, "", ""))


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestCollectAnswers:
    @pytest.mark.unit
    def test_only_passed_flags_are_collected(self):
        args = build_parser().parse_args(["my-app", "--type", "react", "--css-framework", "unocss"])
        assert collect_answers(args) == {
            "target_dir": "my-app",
            "project_type": "react",
            "css_framework": "unocss",
        }

    @pytest.mark.unit
    def test_boolean_flags(self):
        args = build_parser().parse_args(["--git", "--install", "--force", "--code-quality-config"])
        answers = collect_answers(args)
        assert answers == {
            "git": True,
            "install_deps": True,
            "remove_exist_folder": True,
            "code_quality_config": True,
        }

    @pytest.mark.unit
    def test_dest_names(self):
        args = build_parser().parse_args(
            ["-t", "vue", "--routing", "vue-router", "--code-quality", "biome", "-p", "bun"]
        )
        answers = collect_answers(args)
        assert answers["routing_library"] == "vue-router"
        assert answers["code_quality_tools"] == "biome"
        assert answers["pkg_manager"] == "bun"

    @pytest.mark.unit
    def test_flags_override_answers_file(self, tmp_path):
        answers_file = tmp_path / "answers.json"
        answers_file.write_text(
            json.dumps({"project_type": "node", "language": "javascript"}), encoding="utf-8"
        )
        args = build_parser().parse_args(["--answers", str(answers_file), "--language", "typescript"])
        answers = collect_answers(args)
        assert answers["project_type"] == "node"
        assert answers["language"] == "typescript"

    @pytest.mark.unit
    def test_camel_case_file_keys_are_normalised(self, tmp_path):
        answers_file = tmp_path / "answers.json"
        answers_file.write_text(
            json.dumps({"projectType": "react", "cssFramework": "unocss", "targetDir": "web"}),
            encoding="utf-8",
        )
        args = build_parser().parse_args(["--answers", str(answers_file), "--css-framework", "tailwindcss"])
        assert collect_answers(args) == {
            "project_type": "react",
            "css_framework": "tailwindcss",
            "target_dir": "web",
        }

    @pytest.mark.unit
    def test_flag_overrides_camel_case_project_type(self, tmp_path):
        answers_file = tmp_path / "answers.json"
        answers_file.write_text(json.dumps({"projectType": "react"}), encoding="utf-8")
        args = build_parser().parse_args(["--answers", str(answers_file), "--type", "vue"])
        answers = collect_answers(args)
        assert answers == {"project_type": "vue"}
        assert resolve_config(answers).project_type == "vue"

    @pytest.mark.unit
    def test_invalid_choice_is_a_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--type", "angular"])
        assert exc_info.value.code == 2


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------


class TestMain:
    @pytest.mark.unit
    def test_dry_run_writes_nothing(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)

        main(["demo", "--type", "react", "--dry-run"])

        assert not (tmp_path / "demo").exists()
        assert "src/app.tsx" in capsys.readouterr().out

    @pytest.mark.unit
    def test_invalid_combination_exits_1(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as exc_info:
            main(["demo", "--type", "node", "--css-framework", "tailwindcss"])
        assert exc_info.value.code == 1
        assert not (tmp_path / "demo").exists()

    @pytest.mark.unit
    def test_router_for_wrong_framework_exits_1(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as exc_info:
            main(["demo", "--type", "react", "--routing", "vue-router", "--dry-run"])
        assert exc_info.value.code == 1

    @pytest.mark.unit
    def test_unreadable_answers_file_exits_1(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as exc_info:
            main(["--answers", str(tmp_path / "missing.json")])
        assert exc_info.value.code == 1

    @pytest.mark.unit
    @pytest.mark.parametrize("payload", ["[1, 2]", '"react"', "42", "{not json"])
    def test_answers_file_must_be_an_object(self, tmp_path, monkeypatch, payload):
        monkeypatch.chdir(tmp_path)
        answers_file = tmp_path / "answers.json"
        answers_file.write_text(payload, encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["demo", "--answers", str(answers_file), "--dry-run"])
        assert exc_info.value.code == 1

    @pytest.mark.unit
    def test_camel_case_answers_file_with_flag_override(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        answers_file = tmp_path / "answers.json"
        answers_file.write_text(
            json.dumps({"projectType": "react", "cssFramework": "unocss"}), encoding="utf-8"
        )

        main(["demo", "--answers", str(answers_file), "--css-framework", "tailwindcss", "--dry-run"])

        assert "src/app.tsx" in capsys.readouterr().out

    @pytest.mark.unit
    def test_existing_directory_exits_1(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "demo").mkdir()
        (tmp_path / "demo" / "file.txt").write_text("x", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main(["demo", "--type", "node"])

        assert exc_info.value.code == 1
        assert not (tmp_path / "demo" / "package.json").exists()

    @pytest.mark.unit
    def test_successful_run(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)

        main(["demo", "--type", "vue", "--css-framework", "unocss", "--pkg-manager", "npm"])

        project_dir = tmp_path / "demo"
        assert (project_dir / "src" / "main.ts").is_file()
        assert (project_dir / "uno.config.ts").is_file()
        manifest = json.loads((project_dir / "package.json").read_text(encoding="utf-8"))
        assert manifest["devDependencies"]["unocss"] == "^66.3.3"

        out = capsys.readouterr().out
        assert "npm install" in out
        assert "npm run dev" in out

    @pytest.mark.unit
    def test_git_and_install_flags_reach_writer(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch("hana.writer.run_command", new=_succeeding()) as mock_run:
            main(["demo", "--git", "--install", "--pkg-manager", "yarn"])
        commands = [call.args[0] for call in mock_run.await_args_list]
        assert commands == [["git", "init"], ["yarn"]]
