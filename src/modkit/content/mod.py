import asyncio
from typing import Dict

from modkit.config import settings
from modkit.util.logging import get_logger
from modkit.util.progress import ProgressCounter

from .blocks import Block

logger = get_logger(__name__)


class Mod:
    """A namespace of blocks plus the Writer its output goes to.

    Args:
        id: Namespace used in every full id and output file name
        writer: The Writer that owns the output directory
        is_release: Write compact JSON instead of indented JSON
    """

    def __init__(self, id, writer, is_release=False):
        self.id = id
        self.writer = writer
        self.is_release = is_release
        self.blocks: Dict[str, Block] = {}

    def create_block(self, id):
        if id in self.blocks:
            logger.warning("Replacing block with the same id", mod=self.id, block=id)

        block = Block(id, self)
        self.blocks[id] = block
        return block

    def get_block_id(self, block):
        if isinstance(block, Block):
            block = block.id
        return f"{self.id}:{block}"

    def get_block_state_id(self, state):
        return state.get_full_id()

    def get_block_states(self):
        for block in self.blocks.values():
            yield from block.states.values()

    def get_models(self):
        """Every distinct model referenced by a block state, in first-seen order."""
        models = {}
        for state in self.get_block_states():
            models.setdefault(id(state.model), state.model)
        return list(models.values())

    def get_trigger_sheets(self):
        sheets = {}
        for state in self.get_block_states():
            if state.trigger_sheet is not None:
                sheets.setdefault(id(state.trigger_sheet), state.trigger_sheet)
        return list(sheets.values())

    def _warn_on_aliased_models(self, models):
        seen = {}
        for model in models:
            name = self.writer.get_name(model.name)
            if name in seen:
                logger.warning(
                    "Distinct models share an output file",
                    mod=self.id,
                    file_name=name,
                )
            seen[name] = model

    async def write(self, clean=True):
        """Write every block, model and trigger sheet of this mod.

        Args:
            clean: Rebuild the output directory skeleton first

        Raises:
            OSError: The first failed file write
        """
        blocks = list(self.blocks.values())
        models = self.get_models()
        sheets = self.get_trigger_sheets()
        self._warn_on_aliased_models(models)

        logger.info(
            "Writing mod",
            mod=self.id,
            directory=self.writer.directory,
            blocks=len(blocks),
            models=len(models),
            trigger_sheets=len(sheets),
        )

        if clean:
            await self.writer.create_output_dir()
        else:
            self.writer.start_session()
        self.writer.pretty = not self.is_release

        semaphore = asyncio.Semaphore(settings.WRITE_CONCURRENCY)

        with ProgressCounter(
            f"Writing {self.id}", len(blocks) + len(models) + len(sheets)
        ) as progress:

            async def write_entity(entity):
                path = await self.writer.write(entity, self.id)
                progress.increment(repr(entity))
                return path

            async def write_bounded(entity):
                async with semaphore:
                    return await write_entity(entity)

            await asyncio.gather(
                *(write_entity(block) for block in blocks),
                *(write_bounded(model) for model in models),
                *(write_bounded(sheet) for sheet in sheets),
            )

        logger.info("Finished writing mod", mod=self.id)
