"""Main entry point for the terminal to-do list."""
from config import get_settings
from logging_setup import setup_logging
from todo_list import TaskList
from cli import CLI


def main():
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    cli = CLI(TaskList(), banner=settings.banner)
    cli.run()

if __name__ == "__main__":
    main()
