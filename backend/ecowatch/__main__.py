from ecowatch.main import run

run()
