"""
Plan Store
==========

Persists calendar plans the user chose to save, keyed by crop.

All plans live in one JSON blob under a single storage key:

    {"<cropKey>": {"cropKey": "<cropKey>", "tasks": [{"day": "1-7", "taskKey": "prepareSoil"}, ...]}}

The blob sits in a simple key-value storage backend:
- InMemoryStorage: process-local dict (tests, throwaway sessions)
- FileStorage: one JSON file per key in a directory
- DynamoDBStorage: one table item per key ({"pk": key, "value": blob})

Store operations never raise on storage or parse errors. Failures are logged
and reported as "nothing saved" / "no plans".
"""

import json
import os
import tempfile
from typing import Dict, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from . import config
from .models import CalendarPlan
from .utils.logger import logger


STORAGE_ERRORS = (OSError, ValueError, TypeError, ClientError, BotoCoreError)


class KeyValueStorage:
    """Minimal string key-value storage interface."""

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError


class InMemoryStorage(KeyValueStorage):

    def __init__(self, initial: Dict[str, str] = None):
        self._items = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileStorage(KeyValueStorage):
    """Stores each key as <directory>/<key>.json."""

    def __init__(self, directory: str):
        self.directory = directory

    def _path(self, key: str) -> str:
        return os.path.join(self.directory, f"{key}.json")

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not os.path.exists(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def set_item(self, key: str, value: str) -> None:
        os.makedirs(self.directory, exist_ok=True)
        # Write then rename so readers never see a half-written file
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_path, self._path(key))
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        if os.path.exists(path):
            os.remove(path)


class DynamoDBStorage(KeyValueStorage):
    """
    DynamoDB-backed storage.

    DynamoDB Schema:
    ----------------
    Table: crop-advisor-plans

    Primary Key:
        - pk (String): storage key, e.g. "savedFarmingCalendars"

    Attributes:
        - value (String): serialized blob
    """

    def __init__(self, table_name: str = None, region: str = None, table=None):
        self.table_name = table_name or config.PLANS_TABLE
        self.region = region or config.AWS_REGION
        self._table = table

    @property
    def table(self):
        if self._table is None:
            dynamodb = boto3.resource("dynamodb", region_name=self.region)
            self._table = dynamodb.Table(self.table_name)
        return self._table

    def get_item(self, key: str) -> Optional[str]:
        response = self.table.get_item(Key={"pk": key})
        item = response.get("Item")
        if not item:
            return None
        return item.get("value")

    def set_item(self, key: str, value: str) -> None:
        self.table.put_item(Item={"pk": key, "value": value})

    def remove_item(self, key: str) -> None:
        self.table.delete_item(Key={"pk": key})


class PlanStore:
    """Saved calendar plans, one per crop."""

    def __init__(self, storage: KeyValueStorage, storage_key: str = None):
        self.storage = storage
        self.storage_key = storage_key or config.PLAN_STORE_KEY

    def _read_raw(self) -> Dict[str, dict]:
        """
        Read the stored mapping without interpreting the entries.

        Raises:
            ValueError: if the blob is not a JSON object
            plus whatever the storage backend raises
        """
        blob = self.storage.get_item(self.storage_key)
        if not blob:
            return {}
        data = json.loads(blob)
        if not isinstance(data, dict):
            raise ValueError(f"Stored plans must be a JSON object, got {type(data).__name__}")
        return data

    def _write_raw(self, data: Dict[str, dict]) -> None:
        self.storage.set_item(self.storage_key, json.dumps(data, ensure_ascii=False))

    def save_plan(self, plan: CalendarPlan) -> bool:
        """
        Insert or overwrite the plan for plan.crop_key.

        Returns:
            True if saved successfully
        """
        try:
            data = self._read_raw()
            data[plan.crop_key] = plan.to_dict()
            self._write_raw(data)
            logger.info(f"Saved calendar plan for {plan.crop_key} ({len(plan.tasks)} tasks)")
            return True
        except STORAGE_ERRORS as e:
            logger.error(f"Failed to save calendar for {plan.crop_key}: {e}")
            return False

    def load_all_plans(self) -> Dict[str, CalendarPlan]:
        """
        Return every saved plan keyed by crop.

        Returns an empty mapping when nothing is stored or the stored data
        cannot be read. Entries that do not parse are skipped.
        """
        try:
            data = self._read_raw()
        except STORAGE_ERRORS as e:
            logger.error(f"Failed to load calendars: {e}")
            return {}

        plans = {}
        for crop_key, record in data.items():
            try:
                plans[crop_key] = CalendarPlan.from_dict(record)
            except ValueError as e:
                logger.warning(f"Skipping malformed calendar for {crop_key}: {e}")
        return plans

    def get_plan(self, crop_key: str) -> Optional[CalendarPlan]:
        return self.load_all_plans().get(crop_key)

    def delete_plan(self, crop_key: str) -> bool:
        """
        Remove the plan for crop_key.

        Returns:
            True if a plan was removed, False if there was none or the
            storage could not be updated
        """
        try:
            data = self._read_raw()
            if crop_key not in data:
                return False
            del data[crop_key]
            self._write_raw(data)
            logger.info(f"Deleted calendar plan for {crop_key}")
            return True
        except STORAGE_ERRORS as e:
            logger.error(f"Failed to delete calendar for {crop_key}: {e}")
            return False

    def clear_plans(self) -> bool:
        """Drop the whole stored blob, including unreadable data."""
        try:
            self.storage.remove_item(self.storage_key)
            logger.info("Cleared all saved calendars")
            return True
        except STORAGE_ERRORS as e:
            logger.error(f"Failed to clear calendars: {e}")
            return False


def get_plan_store(backend: str = None) -> PlanStore:
    """Build the plan store for the configured backend."""
    backend = (backend or config.PLAN_STORE_BACKEND).lower()
    if backend == "memory":
        storage = InMemoryStorage()
    elif backend == "file":
        storage = FileStorage(config.PLAN_STORE_DIR)
    elif backend == "dynamodb":
        storage = DynamoDBStorage()
    else:
        raise ValueError(f"Unknown plan store backend: {backend}")
    logger.info(f"Using {backend} plan store")
    return PlanStore(storage)
