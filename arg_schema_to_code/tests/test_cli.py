import json
from pathlib import Path

from click.testing import CliRunner

from arg_schema_to_code import __version__
from arg_schema_to_code.arg_schema_to_code import arg_schema_to_code

TEST_DATA = Path(__file__).parent / "test_data"


def run(args):
    runner = CliRunner()
    return runner.invoke(arg_schema_to_code, [str(a) for a in args])


def test_generates_file_with_generation_comment(tmp_path):
    output = tmp_path / "Generated.cs"
    result = run([TEST_DATA / "components.json", output])

    assert result.exit_code == 0, result.output
    code = output.read_text()
    first_line = code.split("\n")[0]
    assert first_line.startswith(f"// Generated by arg_schema_to_code v{__version__} : arg_schema_to_code")
    assert "components.json" in first_line
    assert "public sealed partial class TextNormalizer" in code
    assert "public sealed partial class LinearTrainer" in code
    # Not excluded without a config: the trainer's visible seed is generated
    assert "args.seed = seed;" in code


def test_exclude_option(tmp_path):
    output = tmp_path / "Generated.cs"
    result = run([TEST_DATA / "components.json", output, "--exclude", "seed", "-x", "keepNumbers"])

    assert result.exit_code == 0, result.output
    comment, code = output.read_text().split("\n", 1)
    assert "--exclude seed --exclude keepNumbers" in comment
    assert "seed" not in code
    assert "keepNumbers" not in code
    assert "KeepNumbers" not in code


def test_config_file_matches_reference(tmp_path):
    output = tmp_path / "Generated.cs"
    result = run([TEST_DATA / "components.json", output, "--config", TEST_DATA / "components_config.json"])

    assert result.exit_code == 0, result.output
    assert output.read_text() == (TEST_DATA / "components.cs").read_text()


def test_namespace_and_component_filter(tmp_path):
    output = tmp_path / "Generated.cs"
    result = run([TEST_DATA / "components.json", output, "-n", "My.Ns", "-k", "linear_trainer"])

    assert result.exit_code == 0, result.output
    code = output.read_text()
    assert "namespace My.Ns\n{\n" in code
    assert "LinearTrainer" in code
    assert "TextNormalizer" not in code


def test_unknown_component(tmp_path):
    result = run([TEST_DATA / "components.json", tmp_path / "out.cs", "-k", "missing"])
    assert result.exit_code != 0
    assert "missing" in result.output


def test_invalid_catalog_names_component_and_argument(tmp_path):
    catalog = tmp_path / "catalog.json"
    catalog.write_text(
        json.dumps(
            {
                "components": [
                    {
                        "name": "broken_transform",
                        "arguments": [{"name": "weights", "type": "int", "collection": True, "item_type": None}],
                    }
                ]
            }
        )
    )
    output = tmp_path / "out.cs"
    result = run([catalog, output])

    assert result.exit_code != 0
    assert "broken_transform" in result.output
    assert "weights" in result.output
    assert not output.exists()


def test_unknown_kind_fails_without_output(tmp_path):
    catalog = tmp_path / "catalog.json"
    catalog.write_text(json.dumps([{"name": "scorer", "kind": "evaluator", "arguments": []}]))
    output = tmp_path / "out.cs"
    result = run([catalog, output])

    assert result.exit_code != 0
    assert "evaluator" in result.output
    assert not output.exists()


def test_excluded_argument_with_unknown_type(tmp_path):
    catalog = tmp_path / "catalog.json"
    catalog.write_text(
        json.dumps([{"name": "counter", "arguments": [{"name": "count", "type": "int"}, {"name": "weird", "type": "decimal"}]}])
    )
    output = tmp_path / "out.cs"
    result = run([catalog, output, "-x", "weird"])

    assert result.exit_code == 0, result.output
    code = output.read_text().split("\n", 1)[1]
    assert "args.count = count;" in code
    assert "weird" not in code
