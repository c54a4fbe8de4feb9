from import_zones.__main__ import cli


CONFIG = {
    "zones": [
        {"name": "src", "target": "^src/", "forbidden_patterns": ["lodash"]},
        {
            "name": "core",
            "target": "^src/core/",
            "allowed_patterns": ["src/core/base"],
        },
    ]
}


def test_explain_forbidden(write_config, cli_runner) -> None:
    config_path = write_config(CONFIG)

    result = cli_runner.invoke(
        cli, ["--config", str(config_path), "explain", "src/api/handler.ts", "lodash"]
    )

    assert result.exit_code == 1
    assert "forbiddenPatternWasViolated" in result.output
    assert 'Import pattern "lodash" is not allowed.' in result.output


def test_explain_no_allowed_match(write_config, cli_runner) -> None:
    config_path = write_config(CONFIG)

    result = cli_runner.invoke(
        cli, ["--config", str(config_path), "explain", "src/core/x.ts", "./other"]
    )

    assert result.exit_code == 1
    assert "noAllowedPatternDidMatch" in result.output
    assert "core" in result.output


def test_explain_ok(write_config, cli_runner) -> None:
    config_path = write_config(CONFIG)

    result = cli_runner.invoke(
        cli, ["--config", str(config_path), "explain", "src/core/x.ts", "../base"]
    )

    assert result.exit_code == 0
    assert "is allowed" in result.output


def test_explain_unconstrained_file(write_config, cli_runner) -> None:
    config_path = write_config(CONFIG)

    result = cli_runner.invoke(
        cli, ["--config", str(config_path), "explain", "docs/readme.ts", "lodash"]
    )

    assert result.exit_code == 0
    assert "No zone targets docs/readme.ts." in result.output
