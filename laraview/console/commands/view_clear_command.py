"""
View Clear Command
Removes all compiled view files
"""
from laraview.console.command import Command
from laraview.filesystem import Filesystem
from laraview.support import Config


class ViewClearCommand(Command):
    """Clear compiled views"""

    name = "view:clear"
    description = "Clear all compiled view files"
    signature = "view:clear --cache=DIR"

    async def handle(self, cache: str = None, **kwargs):
        if not self.require(cache=cache):
            return 1

        files = Filesystem()

        if not files.is_directory(cache):
            self.error(f"View path not found: {cache}")
            return 1

        extension = Config.get('view.compiled_extension')
        compiled = files.files(cache, f"*.{extension}")

        if not compiled:
            self.info("No compiled views to clear")
            return 0

        if not files.delete(*compiled):
            self.error("Failed to delete some compiled views")
            return 1

        self.logger.info(f"Removed {len(compiled)} compiled view(s) from [{cache}]")
        self.success(f"Compiled views cleared successfully! ({len(compiled)} removed)")
        return 0
