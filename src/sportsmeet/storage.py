"""Local JSON persistence of whole event snapshots."""

# Sports Meet
# Copyright (C) 2025  Sports Meet developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
from pathlib import Path
from typing import Optional, Union

from sportsmeet.event import SportsEvent
from sportsmeet.exceptions import FileLoadException, FileSaveException
from sportsmeet.models import EventConfig
from sportsmeet.type_hints import ShuffleFunction
from sportsmeet.utils import setup_logger

logger = setup_logger(__name__)


def load_config(path: Union[str, Path]) -> EventConfig:
    """Load an EventConfig from a JSON file.

    Raises:
        FileLoadException: If the file cannot be read, parsed or is malformed
        InvalidConfigurationException: If the settings are inconsistent
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FileLoadException(f"Cannot read config file {path}: {e}") from e

    try:
        return EventConfig.from_dict(data)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise FileLoadException(f"Malformed config file {path}: {e}") from e


class EventStore:
    """Reads and writes whole-event snapshots in a single JSON file.

    Every save rewrites the full participant and match collections; there is
    no incremental format.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(
        self,
        config: Optional[EventConfig] = None,
        shuffle: Optional[ShuffleFunction] = None,
    ) -> SportsEvent:
        """Load the event, or start an empty one if the file does not exist.

        Args:
            config: Overrides the configuration stored in the file
            shuffle: Permutation used by auto-scheduling

        Raises:
            FileLoadException: If the file exists but is unreadable or malformed
        """
        if not self.path.exists():
            logger.info(f"No data file at {self.path}, starting a new event")
            return SportsEvent(config=config, shuffle=shuffle)

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise FileLoadException(f"Cannot read event file {self.path}: {e}") from e

        try:
            event = SportsEvent.from_dict(data, config=config, shuffle=shuffle)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise FileLoadException(f"Malformed event file {self.path}: {e}") from e

        logger.debug(
            f"Loaded {len(event.participants)} participants and "
            f"{len(event.matches)} matches from {self.path}"
        )
        return event

    def save(self, event: SportsEvent) -> None:
        """Write the full event snapshot.

        The snapshot is written to a temporary file first and then moved
        over the old one.

        Raises:
            FileSaveException: If the file cannot be written
        """
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(event.to_dict(), f, indent=2)
            tmp_path.replace(self.path)
        except OSError as e:
            raise FileSaveException(f"Cannot save event to {self.path}: {e}") from e
        logger.debug(f"Saved event to {self.path}")
