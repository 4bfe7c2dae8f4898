from apprun_cli.cli import apprun_cli

if __name__ == "__main__":
    apprun_cli()
