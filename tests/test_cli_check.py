import json
import sys
from pathlib import Path

from import_zones.__main__ import cli, main


CONFIG = {
    "zones": [
        {
            "name": "api",
            "target": "^src/api/",
            "forbidden_patterns": [
                "lodash",
                {
                    "pattern": "moment",
                    "error_message": "Use date-fns instead of moment.",
                },
            ],
        },
        {
            "name": "core",
            "target": "^src/core/",
            "allowed_patterns": ["src/core/base", {"regex": "^@org/"}],
        },
    ]
}


def test_check_json_reports(
    write_config, write_source, project_root: Path, cli_runner
) -> None:
    config_path = write_config(CONFIG)
    write_source("src/api/handler.ts", 'import _ from "lodash";\nimport m from "moment";\n')
    write_source("src/core/x.ts", 'import { other } from "src/core/other";\n')
    write_source("docs/readme.ts", 'import _ from "lodash";\n')

    result = cli_runner.invoke(
        cli,
        ["--config", str(config_path), "check", str(project_root), "--format", "json"],
    )

    assert result.exit_code == 1
    payload = json.loads(result.output)
    assert [(item["path"], item["line"], item["message"]) for item in payload] == [
        ("src/api/handler.ts", 1, 'Import pattern "lodash" is not allowed.'),
        ("src/api/handler.ts", 2, "Use date-fns instead of moment."),
        (
            "src/core/x.ts",
            1,
            "Imports violates restrictions. None of the allowed patterns did match. "
            r'allowedPatterns="src/core/base" or "/^@org\//"',
        ),
    ]
    assert [item["message_id"] for item in payload] == [
        "forbiddenPatternWasViolated",
        "forbiddenPatternWasViolated",
        "noAllowedPatternDidMatch",
    ]


def test_check_text_output_clean(
    write_config, write_source, project_root: Path, cli_runner
) -> None:
    config_path = write_config(CONFIG)
    write_source("src/api/handler.ts", 'import React from "react";\n')

    result = cli_runner.invoke(
        cli, ["--config", str(config_path), "check", str(project_root)]
    )

    assert result.exit_code == 0
    assert "No import violations." in result.output


def test_check_text_output_with_violations(
    write_config, write_source, project_root: Path, cli_runner
) -> None:
    config_path = write_config(CONFIG)
    source = write_source("src/api/handler.ts", 'import _ from "lodash";\n')

    result = cli_runner.invoke(cli, ["--config", str(config_path), "check", str(source)])

    assert result.exit_code == 1
    assert "forbiddenPatternWasViolated" in result.output
    assert "src/api/handler.ts" in result.output
    assert "1:15" in result.output


def test_check_discovers_config_in_working_directory(
    write_config, write_source, project_root: Path, cli_runner, monkeypatch
) -> None:
    write_config(CONFIG)
    write_source("src/api/handler.ts", 'import _ from "lodash";\n')
    monkeypatch.chdir(project_root)

    result = cli_runner.invoke(cli, ["check", "--format", "json"])

    assert result.exit_code == 1
    assert json.loads(result.output)[0]["import_target"] == "lodash"


def test_check_without_config_fails(project_root: Path, cli_runner, monkeypatch) -> None:
    monkeypatch.chdir(project_root)

    result = cli_runner.invoke(cli, ["check"])

    assert result.exit_code != 0
    assert "No config file found" in result.output


def test_check_invalid_config_fails(write_config, project_root: Path, cli_runner) -> None:
    config_path = write_config({"zones": [{"allowed_patterns": ["x"]}]})

    result = cli_runner.invoke(
        cli, ["--config", str(config_path), "check", str(project_root)]
    )

    assert result.exit_code != 0
    assert "Invalid config schema" in result.output


def test_main_maps_exit_codes(
    write_config, write_source, project_root: Path, monkeypatch, capsys
) -> None:
    config_path = write_config(CONFIG)
    write_source("src/api/handler.ts", 'import _ from "lodash";\n')

    monkeypatch.setattr(
        sys,
        "argv",
        ["import-zones", "--config", str(config_path), "check", str(project_root), "--format", "json"],
    )
    assert main() == 1

    monkeypatch.setattr(
        sys,
        "argv",
        ["import-zones", "--config", str(project_root / "missing.yaml"), "zones"],
    )
    assert main() == 2
    assert "Missing required config file" in capsys.readouterr().err
