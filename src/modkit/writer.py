"""
Output pipeline: routes in-memory entities to files under one directory.

Layout of the output directory:

    blocks/block_<ns>_<id>.json
    block_events/block_event_<ns>_<id>.json
    models/blocks/model_<ns>_<name>.json
    textures/blocks/<file name>

Shared entities (trigger sheets, materials, textures) are written once per
session. The Writer records each one before the first await of its handler,
so writes scheduled concurrently on one event loop never produce the same
file twice. A session starts with the Writer and again on every
start_session() or create_output_dir() call.
"""

import asyncio
import functools
import json
import os
import shutil

from modkit.config import settings
from modkit.constants import CLEANED_DIRECTORIES, DEFAULT_NAMESPACE, OUTPUT_DIRECTORIES
from modkit.content.blocks import Block
from modkit.content.materials import Material
from modkit.content.models import BlockModel
from modkit.content.textures import Texture
from modkit.content.triggers import TriggerSheet, base_trigger_sheet
from modkit.util.logging import get_logger
from modkit.util.text import to_file_name

logger = get_logger(__name__)


class Writer:
    def __init__(self, directory=None):
        self.directory = None
        self.pretty = False
        # id(entity) -> entity, the reference keeps ids from being reused
        self._written = {}
        self.set_target_directory(settings.OUTPUT_DIR if directory is None else directory)

    def set_target_directory(self, directory):
        self.directory = os.path.abspath(directory)
        self.start_session()

    def start_session(self):
        """Forget which shared entities were written, so the next writes emit them again."""
        self._written.clear()

    def is_written(self, entity):
        return entity is base_trigger_sheet() or id(entity) in self._written

    def _claim(self, entity):
        if self.is_written(entity):
            return False
        self._written[id(entity)] = entity
        return True

    def get_sublocation(self, *parts):
        return os.path.join(self.directory, *parts)

    def get_name(self, id):
        return to_file_name(id)

    def stringify(self, payload):
        if self.pretty:
            return json.dumps(payload, indent=4)
        return json.dumps(payload, separators=(",", ":"))

    async def create_output_dir(self):
        """Delete the generated subdirectories and recreate the directory skeleton."""
        self.start_session()
        await asyncio.to_thread(self._rebuild_output_dir)

    def _rebuild_output_dir(self):
        for parts in CLEANED_DIRECTORIES:
            path = self.get_sublocation(*parts)
            if os.path.isdir(path):
                logger.info("Deleting output directory", path=path)
                shutil.rmtree(path)

        for parts in OUTPUT_DIRECTORIES:
            os.makedirs(self.get_sublocation(*parts), exist_ok=True)

    async def _write_file(self, path, data):
        await asyncio.to_thread(self._write_bytes, path, data)
        logger.debug("Wrote file", path=path, size=len(data))
        return path

    @staticmethod
    def _write_bytes(path, data):
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "wb") as f:
            f.write(data)

    async def _write_json(self, path, payload):
        return await self._write_file(path, self.stringify(payload).encode("utf-8"))

    @functools.singledispatchmethod
    async def write(self, entity, namespace=DEFAULT_NAMESPACE):
        """Write one entity and return the path written, or None if nothing was written."""
        logger.debug("Ignoring entity with no output", entity=repr(entity))
        return None

    @write.register
    async def _(self, entity: Block, namespace=DEFAULT_NAMESPACE):
        path = self.get_sublocation(
            "blocks", f"block_{namespace}_{self.get_name(entity.id)}.json"
        )
        return await self._write_json(path, entity.serialize())

    @write.register
    async def _(self, entity: TriggerSheet, namespace=DEFAULT_NAMESPACE):
        if not self._claim(entity):
            return None

        if entity.parent is not None and not self.is_written(entity.parent):
            await self.write(entity.parent, namespace)

        path = self.get_sublocation(
            "block_events", f"block_event_{namespace}_{self.get_name(entity.id)}.json"
        )
        return await self._write_json(path, entity.serialize(namespace))

    @write.register
    async def _(self, entity: BlockModel, namespace=DEFAULT_NAMESPACE):
        await asyncio.gather(
            *(
                self.write(material, namespace)
                for material in entity.get_all_materials()
                if material.has_raster
            )
        )

        path = self.get_sublocation(
            "models", "blocks", f"model_{namespace}_{self.get_name(entity.name)}.json"
        )
        return await self._write_json(path, entity.serialize())

    @write.register
    async def _(self, entity: Material, namespace=DEFAULT_NAMESPACE):
        if not entity.has_raster or not self._claim(entity):
            return None

        await self.write(entity.texture, namespace)
        return self.get_sublocation("textures", "blocks", entity.file_name)

    @write.register
    async def _(self, entity: Texture, namespace=DEFAULT_NAMESPACE):
        if not self._claim(entity):
            return None

        data = await asyncio.to_thread(entity.serialize)
        path = self.get_sublocation("textures", "blocks", entity.file_name)
        return await self._write_file(path, data)
