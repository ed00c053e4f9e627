import json

import click

from . import __version__
from .cli_utils import generation_comment
from .logging import configure_logging
from .pipeline import CodeGenerationError, CodeGeneratorConfig, FileGenerator
from .pipeline.schema_ast import load_catalog


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--exclude", "-x", multiple=True, help="Argument long-name to leave out of every generated block")
@click.option("--component", "-k", multiple=True, help="Only generate these components")
@click.option("--namespace", "-n", default=None, type=str, help="Namespace wrapping the generated classes")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every skipped argument")
@click.argument("catalog", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def arg_schema_to_code(config, exclude, component, namespace, verbose, catalog, output):
    logger = configure_logging(verbose=verbose)

    if config is not None:
        with open(config) as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()

    # CLI options extend/override the config file
    config.exclude = list(config.exclude) + [name for name in exclude if name not in config.exclude]
    if namespace is not None:
        config.csharp_namespace = namespace

    try:
        components = load_catalog(catalog, config.is_excluded)
    except CodeGenerationError as e:
        raise click.ClickException(f"Invalid catalog: {e}") from e

    if component:
        known = {c.name for c in components}
        missing = [name for name in component if name not in known]
        if missing:
            raise click.ClickException(f"Unknown component(s): {', '.join(missing)}")
        components = [c for c in components if c.name in component]

    codegen = FileGenerator(config, generation_comment(arg_schema_to_code, __version__))
    try:
        out = codegen.generate(components)
    except CodeGenerationError as e:
        raise click.ClickException(f"Generation failed: {e}") from e

    with open(output, "w") as f:
        f.write(out)
    logger.info("Wrote %d component(s) to %s", len(components), output)
