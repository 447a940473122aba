from flask import Flask, redirect

from viewgen import flask_render, flask_view_route
from viewgen.elements import h1, p


def test_flask_view_route():
    app = Flask(__name__)

    @flask_view_route(app, "/hello/<name>")
    def hello(name):
        return h1("Hello ", name)

    response = app.test_client().get("/hello/world")
    assert response.status_code == 200
    assert response.mimetype == "text/html"
    assert response.get_data(as_text=True) == "<h1>Hello world</h1>"
    assert "hello" in app.view_functions


def test_flask_render_status_and_options():
    response = flask_render([p("a"), p("b")], status=404, sep="\n")
    assert response.status_code == 404
    assert response.get_data(as_text=True) == "<p>a</p>\n<p>b</p>"


def test_flask_view_route_passes_responses_through():
    app = Flask(__name__)

    @flask_view_route(app, "/old")
    def old():
        return redirect("/new")

    response = app.test_client().get("/old")
    assert response.status_code == 302
    assert response.headers["Location"].endswith("/new")
