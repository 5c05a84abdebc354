# This file is adapted from https://github.com/qtile/qtile
import asyncio

import pytest


@pytest.fixture(scope="function")
def fake_bar():
    class _Drawer:
        def clear(self, *args, **kwargs):
            pass

        def draw(self, *args, **kwargs):
            pass

        def finalize(self):
            pass

    class _Window:
        def create_drawer(self, *args, **kwargs):
            return _Drawer()

    class _Screen:
        width = 288
        height = 336

        def __init__(self):
            self.painted = []

        def paint(self, path, mode=None):
            self.painted.append(path)

    from libqtile.bar import Bar

    height = 24
    b = Bar([], height)
    b.height = height
    b.horizontal = True
    b.window = _Window()
    b.screen = _Screen()
    return b


@pytest.fixture(scope="function")
def fake_qtile():
    def no_op(*args, **kwargs):
        pass

    class _Timer:
        def __init__(self, delay, func, args):
            self.delay = delay
            self.func = func
            self.args = args
            self.cancelled = False

        def cancel(self):
            self.cancelled = True

    class FakeQtile:
        def __init__(self):
            self.register_widget = no_op
            self.timers = []

        # Widgets call call_soon(asyncio.create_task, self._config_async)
        # at _configure. The coroutine needs to be run in a loop to suppress
        # warnings
        def call_soon(self, func, *args):
            coroutines = [arg for arg in args if asyncio.iscoroutine(arg)]
            if coroutines:
                loop = asyncio.new_event_loop()
                asyncio.set_event_loop(loop)
                for func in coroutines:
                    loop.run_until_complete(func)
                loop.close()

        def call_later(self, delay, func, *args):
            timer = _Timer(delay, func, args)
            self.timers.append(timer)
            return timer

    return FakeQtile()
