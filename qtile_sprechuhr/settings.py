# Copyright (c) 2026 elParaguayo
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
from __future__ import annotations

import json
from dataclasses import asdict, fields, replace
from pathlib import Path

from libqtile.confreader import ConfigError
from libqtile.log_utils import logger

from qtile_sprechuhr.formatter import Configuration

OPTIONS = tuple(f.name for f in fields(Configuration))

SETTINGS_FILE = "settings.json"


def decode_flag(value) -> bool:
    """
    Converts an "on"/"off" value received from a command into a boolean.

    Booleans are accepted unchanged so the function can be used on values
    that have already been decoded.
    """
    if isinstance(value, bool):
        return value

    if isinstance(value, str):
        flag = value.strip().lower()
        if flag == "on":
            return True
        if flag == "off":
            return False

    raise ConfigError(f"Expected 'on' or 'off', got {value!r}.")


class SettingsStore:
    """
    Keeps the clock flags between qtile sessions.

    The flags are stored as a single JSON object in ``path``. Nothing is
    written until ``save`` is called, i.e. when the widget is finalized.
    """

    def __init__(self, path):
        self.path = Path(path).expanduser()

    def load(self, defaults: Configuration | None = None) -> Configuration:
        if defaults is None:
            defaults = Configuration()

        try:
            with open(self.path, "r") as f:
                stored = json.load(f)
        except FileNotFoundError:
            logger.debug("No saved SprechUhr settings at %s.", self.path)
            return defaults
        except (OSError, ValueError):
            logger.warning("Unable to read SprechUhr settings from %s. Using defaults.", self.path)
            return defaults

        if not isinstance(stored, dict):
            logger.warning("Unexpected SprechUhr settings format in %s. Using defaults.", self.path)
            return defaults

        values = {}
        for name in OPTIONS:
            if name not in stored:
                continue
            if not isinstance(stored[name], bool):
                logger.warning("Ignoring invalid saved value for '%s': %r", name, stored[name])
                continue
            values[name] = stored[name]

        logger.debug("Loaded SprechUhr settings: %s", values)
        return replace(defaults, **values)

    def save(self, config: Configuration):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(asdict(config), f, indent=2)
        except OSError:
            logger.warning("Unable to save SprechUhr settings to %s.", self.path)
            return

        logger.debug("Saved SprechUhr settings to %s.", self.path)
