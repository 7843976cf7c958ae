from trustnet.cli import app

app()
