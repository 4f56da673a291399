from troubleshoot_assist.cli import app

app(prog_name="troubleshoot-assist")
