from seatnorm.cli import app

app()
