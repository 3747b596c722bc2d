"""
View Cache Command
Compiles all Blade views ahead of the first request
"""
import os

from laraview.blade import ViewService
from laraview.console.command import Command
from laraview.exceptions import CompileException
from laraview.view.engines import EngineKind


class ViewCacheCommand(Command):
    """Precompile every Blade view"""

    name = "view:cache"
    description = "Compile all of the application's Blade views"
    signature = "view:cache --views=DIR[,DIR] --cache=DIR"

    async def handle(self, views: str = None, cache: str = None, **kwargs):
        if not self.require(views=views, cache=cache):
            return 1

        blade = ViewService(str(views).split(','), cache)
        factory = blade.factory
        blade_extensions = [
            extension for extension, kind in factory.get_extensions().items()
            if kind == EngineKind.BLADE
        ]

        rows = []
        failed = 0

        for path in blade.finder.get_paths():
            for file in blade.files.all_files(path):
                if not any(file.endswith('.' + extension) for extension in blade_extensions):
                    continue

                try:
                    compiled = blade.compiler.compile(file)
                except CompileException as e:
                    self.logger.warning(f"Failed to compile view [{file}]")
                    self.error(str(e))
                    failed += 1
                    continue

                rows.append([os.path.relpath(file, path), os.path.basename(compiled)])

        if rows:
            self.table(['View', 'Compiled'], rows)
            self.line()

        if failed:
            self.error(f"{failed} view(s) failed to compile")
            return 1

        self.success(f"Blade views cached successfully! ({len(rows)} compiled)")
        return 0
