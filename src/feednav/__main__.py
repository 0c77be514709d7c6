from feednav.cli import app

app()
