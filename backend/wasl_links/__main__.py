from wasl_links.main import run

run()
