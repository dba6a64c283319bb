"""News — a WSGI front controller on top of signpost.

Demonstrates rule-constrained placeholders, ``Class@method`` targets,
parameter reordering, fallback routes, and mapping ``RouteNotFoundError``
to a 404 in the transport layer.

Run:
    python app.py
"""

from wsgiref.simple_server import make_server

from signpost import RequestContext, RouteNotFoundError, Router

router = Router()


@router.handlers.add_class
class NewsController:
    def index(self):
        return "All news"

    def show(self, id):
        return f"News #{id}"

    def section(self, section, id):
        return f"News #{id} in {section}"


@router.handlers.add_function
def home():
    return "Welcome"


router.get("/", "home")
router.get("/news", "NewsController@index")
router.get("/news/{id}", "NewsController@show", {"id": "numeric"})
router.get("/news/{id}/{section}", "NewsController@section", {"section": "letters"})


@router.get("/news/{slug}")
def news_by_slug(slug):
    return f"News titled {slug}"


def app(environ, start_response):
    context = RequestContext.from_environ(environ)
    try:
        result = router.dispatch(context)
    except RouteNotFoundError as exc:
        start_response("404 Not Found", [("Content-Type", "text/plain; charset=utf-8")])
        return [exc.detail.encode()]

    start_response("200 OK", [("Content-Type", "text/plain; charset=utf-8")])
    return [str(result.value).encode()]


if __name__ == "__main__":
    with make_server("127.0.0.1", 8000, app) as server:
        server.serve_forever()
