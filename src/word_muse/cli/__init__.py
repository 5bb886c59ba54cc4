from word_muse.cli.cmds import app

__all__ = ["app"]
