"""
Console
Laravel-style CLI for maintaining compiled views
"""
import asyncio
import sys
from typing import Dict, List, Optional

from laraview.console.command import Command
from laraview.console.commands import ViewCacheCommand, ViewClearCommand
from laraview.logging import LoggerConfig, getLogger

logger = getLogger(__name__)


class Artisan:
    # Built-in commands
    COMMANDS = [
        ViewCacheCommand,
        ViewClearCommand,
    ]

    def __init__(self):
        self.commands: Dict[str, Command] = {}

        for command_class in self.COMMANDS:
            command = command_class()
            self.commands[command.name] = command

    def show_help(self):
        """Show available commands"""
        print("laraview - Blade views console")
        print()

        # Group commands by category
        categories: Dict[str, List[Command]] = {}
        for name, cmd in self.commands.items():
            category = name.split(':')[0] if ':' in name else 'general'
            categories.setdefault(category, []).append(cmd)

        for category in sorted(categories.keys()):
            print(f"{category.upper()}:")
            for cmd in sorted(categories[category], key=lambda c: c.name):
                print(f"  {cmd.name:<20} {cmd.description}")
            print()

        print("Run 'laraview help <command>' for detailed information")

    async def run(self, argv: List[str]) -> int:
        """Run the CLI application"""
        if len(argv) < 2:
            self.show_help()
            return 0

        command_name = argv[1]

        if command_name in ['help', '--help', '-h']:
            if len(argv) > 2:
                cmd_name = argv[2]
                if cmd_name in self.commands:
                    cmd = self.commands[cmd_name]
                    print(f"\nCommand: {cmd.name}")
                    print(f"Description: {cmd.description}")
                    print(f"Signature: {cmd.signature}")
                    return 0

                print(f"Unknown command: {cmd_name}\n")
                self.show_help()
                return 1

            self.show_help()
            return 0

        if command_name not in self.commands:
            print(f"❌ Unknown command: {command_name}\n")
            self.show_help()
            return 1

        command = self.commands[command_name]
        args, kwargs = self._parse_args(argv[2:])

        try:
            exit_code = await command.handle(*args, **kwargs)
        except KeyboardInterrupt:
            print("\n\n⚠ Command interrupted by user")
            return 130
        except Exception as e:
            logger.exception(f"Command {command_name} failed")
            print(f"\n❌ Error executing command: {e}\n")
            return 1

        return exit_code if exit_code is not None else 0

    def _parse_args(self, argv: List[str]):
        """
        Parse command line arguments
        Returns tuple of (positional_args, keyword_args)
        """
        args = []
        kwargs = {}

        for arg in argv:
            if arg.startswith('--'):
                # Long option (--verbose, --name=value)
                if '=' in arg:
                    key, value = arg[2:].split('=', 1)
                    kwargs[key.replace('-', '_')] = value
                else:
                    kwargs[arg[2:].replace('-', '_')] = True
            else:
                args.append(arg)

        return args, kwargs


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point"""
    LoggerConfig.setup_logger()
    return asyncio.run(Artisan().run(argv if argv is not None else sys.argv))


if __name__ == '__main__':
    sys.exit(main())
