import argparse
import asyncio
import runpy

from modkit.config import settings
from modkit.content.mod import Mod
from modkit.util.logging import configure_logging, get_logger
from modkit.writer import Writer

logger = get_logger(__name__)


def get_parser():
    parser = argparse.ArgumentParser(
        prog="modkit", description="Build a mod script into its output files"
    )
    parser.add_argument("script", type=str, help="Python file defining build(mod)")
    parser.add_argument("--namespace", type=str, required=True)
    parser.add_argument("--output", type=str, default=None)
    parser.add_argument("--release", action="store_true")
    parser.add_argument("--no-clean", action="store_true")
    return parser


def load_build(script):
    namespace = runpy.run_path(script, run_name="__modkit_script__")
    build = namespace.get("build")
    if not callable(build):
        return None
    return build


def main(options, parser=None):
    configure_logging(humanize=settings.HUMANIZE_LOGS, level=settings.LOG_LEVEL)

    build = load_build(options.script)
    if build is None:
        (parser or get_parser()).error(
            f"{options.script} does not define a build(mod) function"
        )

    writer = Writer(options.output)
    mod = Mod(options.namespace, writer, is_release=options.release)
    build(mod)

    asyncio.run(mod.write(clean=not options.no_clean))
    logger.info("Wrote mod", mod=mod.id, directory=writer.directory)
    return mod


if __name__ == "__main__":
    parser = get_parser()
    options = parser.parse_args()
    main(options, parser)
