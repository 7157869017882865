from evalcenter import create_app

app = create_app()
