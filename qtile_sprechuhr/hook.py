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
from libqtile.hook import Hook, Registry

hooks: list[Hook] = []

# SprechUhr
sprechuhr_hooks = [
    Hook(
        "sprechuhr_phrase_change",
        """
        SprechUhr widget.

        Fired when the displayed phrase changes (i.e. at most once a minute,
        or every five minutes in fuzzy mode).

        Hooked function should receive one argument which is the
        ``FormatResult`` for the new time.

        .. code:: python

          from libqtile.utils import send_notification

          import qtile_sprechuhr.hook

          @qtile_sprechuhr.hook.subscribe.sprechuhr_phrase_change
          def new_phrase(result):
              if result.minute_text == "punkt":
                  send_notification("Es ist", f"{result.hour_text} Uhr")

        """,
    ),
    Hook(
        "sprechuhr_option_change",
        """
        SprechUhr widget.

        Fired when an option is changed via the ``set_option`` command.

        Hooked function should receive two arguments: the name of the option
        and its new boolean value.

        .. code:: python

          from libqtile.log_utils import logger

          import qtile_sprechuhr.hook

          @qtile_sprechuhr.hook.subscribe.sprechuhr_option_change
          def option_changed(name, value):
              logger.info("SprechUhr option %s is now %s", name, value)

        """,
    ),
]

hooks.extend(sprechuhr_hooks)

# Build the registry and expose helpful entrypoints
qts = Registry("qtile-sprechuhr", hooks)

subscribe = qts.subscribe
unsubscribe = qts.unsubscribe
fire = qts.fire
