from hrms.main import run

run()
