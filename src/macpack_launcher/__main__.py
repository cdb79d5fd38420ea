from macpack_launcher.interfaces.cli.main import entry_point

entry_point()
