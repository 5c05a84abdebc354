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
import os
from dataclasses import asdict, replace
from datetime import datetime

import cairocffi
from libqtile import hook
from libqtile.command.base import expose_command
from libqtile.confreader import ConfigError
from libqtile.log_utils import logger
from libqtile.utils import rgb
from libqtile.widget import base

from qtile_sprechuhr import hook as sprechuhr_hook
from qtile_sprechuhr.formatter import ClockReading, Configuration, format_time
from qtile_sprechuhr.resources.sprechuhr import FACE_HEIGHT, FACE_WIDTH, FRAMES
from qtile_sprechuhr.settings import OPTIONS, SETTINGS_FILE, SettingsStore, decode_flag


def wrap_lines(ctx, lines, width):
    """
    Splits lines that are wider than ``width`` at word boundaries using
    the font currently selected on ``ctx``. Empty lines are kept.
    """
    wrapped = []
    for line in lines:
        if not line or ctx.text_extents(line)[4] <= width:
            wrapped.append(line)
            continue

        current = ""
        for word in line.split(" "):
            candidate = f"{current} {word}" if current else word
            if current and ctx.text_extents(candidate)[4] > width:
                wrapped.append(current)
                current = word
            else:
                current = candidate
        wrapped.append(current)

    return wrapped


class SprechUhr(base._Widget):
    """
    A German speaking clock ("Sprechuhr") drawn as your wallpaper.

    The time is written out in words, e.g. 14:25 is "fünf vor halb drei".

    This is not a traditional widget in that you will not see anything
    displayed in your bar. The widget works in the background and updates
    the screen wallpaper when the phrase changes.

    In ``fuzzy`` mode the time is rounded to the nearest five minutes so
    14:23 is also shown as "fünf vor halb drei".

    Two regional variants are available. ``dialect_nrw`` says "viertel vor
    drei" instead of "dreiviertel drei" at 14:45 and ``dialect_wien`` says
    "viertel drei" instead of "viertel nach zwei" at 14:15.

    Options can be changed while qtile is running by calling the
    ``set_option`` command with ``"on"`` or ``"off"`` e.g.

    .. code:: bash

        qtile cmd-obj -o widget sprechuhr -f set_option -a fuzzy off

    When ``persist`` is ``True``, changed options are saved when qtile shuts
    down and restored the next time the widget is started.
    """

    orientations = base.ORIENTATION_BOTH
    defaults = [
        ("fuzzy", True, "Round the time to the nearest five minutes"),
        ("dialect_nrw", False, "Say 'viertel vor' at quarter to the hour"),
        ("dialect_wien", False, "Say 'viertel' and the next hour at quarter past the hour"),
        ("right_align", True, "Right align the text. False = left aligned."),
        ("show_date", True, "Show weekday and day of month"),
        ("persist", True, "Save options when qtile exits and restore them on start"),
        ("cache", "~/.cache/qtile-sprechuhr", "Location to store wallpaper and options"),
        ("update_interval", 1, "Interval to check time"),
        ("background", "002147", "Background colour"),
        ("foreground_minute", "b2ffff", "Colour for the minute phrase"),
        ("foreground_hour", "ffffaa", "Colour for the hour"),
        ("foreground_date", "ffffff", "Colour for the date"),
        ("font", "sans", "Font for text"),
        ("scale", None, "Size of the clock face. None = fit to screen."),
    ]

    _hooks = [h.name for h in sprechuhr_hook.sprechuhr_hooks]

    def __init__(self, **config):
        base._Widget.__init__(self, 0, **config)
        self.add_defaults(SprechUhr.defaults)
        self.configuration = Configuration(
            fuzzy=self.fuzzy,
            dialect_nrw=self.dialect_nrw,
            dialect_wien=self.dialect_wien,
            right_align=self.right_align,
            show_date=self.show_date,
        )
        self.result = None
        self.needs_draw = False
        self.facefile = None
        self.configured = False

        self.cache = os.path.expanduser(self.cache)
        self.store = SettingsStore(os.path.join(self.cache, SETTINGS_FILE))

    def _configure(self, qtile, bar):
        base._Widget._configure(self, qtile, bar)
        hook.subscribe.screens_reconfigured(self.paint_screen)

        os.makedirs(self.cache, exist_ok=True)
        self.facefile = os.path.join(self.cache, "sprechuhr.png")

        if self.persist:
            self.configuration = self.store.load(self.configuration)

        if self.update_interval:
            self.timeout_add(self.update_interval, self.loop)

    def loop(self):
        self.timeout_add(self.update_interval, self.loop)
        self.tick(datetime.now())

    def tick(self, now):
        """
        Formats the time and redraws the face if the phrase has changed
        or an option was changed since the last tick.
        """
        result = format_time(ClockReading.from_datetime(now), self.configuration)

        if result != self.result:
            if self.result is None or result.layout != self.result.layout:
                logger.debug("SprechUhr using %s layout.", result.layout.value)
            self.result = result
            self.needs_draw = True
            sprechuhr_hook.fire("sprechuhr_phrase_change", result)

        if self.needs_draw:
            self.draw()

        return result

    def draw(self):
        if not self.needs_draw or self.result is None or not self.configured:
            return

        self.render()
        self.paint_screen()
        self.needs_draw = False

    def render(self):
        """Draws the face for the current phrase and writes it to the cache."""
        width = self.bar.screen.width
        height = self.bar.screen.height

        surface = cairocffi.ImageSurface(cairocffi.FORMAT_ARGB32, width, height)
        ctx = cairocffi.Context(surface)
        ctx.set_source_rgba(*rgb(self.background))
        ctx.paint()

        self.draw_face(ctx, width, height)
        surface.write_to_png(self.facefile)

    def draw_face(self, ctx, width, height):
        """
        Writes the phrases into their containers. Only the minute container
        named by the phrase's layout is drawn.

        Returns the names of the containers that were drawn.
        """
        scale = self.scale or min(width / FACE_WIDTH, height / FACE_HEIGHT)
        origin = ((width - FACE_WIDTH * scale) / 2, (height - FACE_HEIGHT * scale) / 2)

        containers = [
            (self.result.layout.value, self.result.minute_lines, self.foreground_minute),
            ("hour", (self.result.hour_text,), self.foreground_hour),
        ]

        if self.configuration.show_date:
            containers.append(("date", (self.result.weekday_text,), self.foreground_date))

        for name, lines, colour in containers:
            self._draw_text(ctx, FRAMES[name], lines, colour, scale, origin)

        return [name for name, _, _ in containers]

    def _draw_text(self, ctx, frame, lines, colour, scale, origin):
        weight = cairocffi.FONT_WEIGHT_BOLD if frame["bold"] else cairocffi.FONT_WEIGHT_NORMAL
        ctx.select_font_face(self.font, cairocffi.FONT_SLANT_NORMAL, weight)
        ctx.set_font_size(frame["fontsize"] * scale)
        ascent, _, line_height, _, _ = ctx.font_extents()

        box_x = origin[0] + frame["x"] * scale
        box_width = (frame["width"] or FACE_WIDTH - frame["x"]) * scale
        y = origin[1] + frame["y"] * scale + ascent
        right = frame["align"] == "text" and self.configuration.right_align

        ctx.set_source_rgba(*rgb(colour))
        for line in wrap_lines(ctx, lines, box_width):
            if line:
                x = box_x
                if right:
                    x += box_width - ctx.text_extents(line)[4]
                ctx.move_to(x, y)
                ctx.show_text(line)
            y += line_height

    def paint_screen(self):
        if not self.facefile or not os.path.isfile(self.facefile):
            return

        self.bar.screen.paint(self.facefile)

    @expose_command()
    def set_option(self, name, value):
        """
        Change an option. ``value`` should be "on" or "off".

        The change is shown the next time the clock is checked.
        """
        if name not in OPTIONS:
            logger.warning("Unknown SprechUhr option: %s", name)
            return

        try:
            flag = decode_flag(value)
        except ConfigError as e:
            logger.warning("Invalid value for SprechUhr option '%s'. %s", name, e)
            return

        self.configuration = replace(self.configuration, **{name: flag})
        self.needs_draw = True
        sprechuhr_hook.fire("sprechuhr_option_change", name, flag)

    @expose_command()
    def get_options(self):
        """Returns the current options."""
        return asdict(self.configuration)

    @expose_command()
    def get_phrase(self):
        """Returns the phrase currently displayed."""
        if self.result is None:
            return {}

        return self.result.as_dict()

    def info(self):
        info = base._Widget.info(self)
        if self.result is not None:
            info["text"] = f"{self.result.minute_text} {self.result.hour_text}"
        return info

    def finalize(self):
        if self.facefile:
            hook.unsubscribe.screens_reconfigured(self.paint_screen)
        if self.persist:
            self.store.save(self.configuration)
        base._Widget.finalize(self)
