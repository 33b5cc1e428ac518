"""
GraphQL View
Strawberry Flask view serving POST /graphql against the Post schema
"""

import json
from typing import ClassVar, List

from flask import Request, Response
from prometheus_client import Counter
from strawberry.flask.views import GraphQLView

from ..config.logger import get_logger
from ..graphql_api import schema, ResolversContext
from ..repositories import PostRepository

GRAPHQL_REQUESTS = Counter(
    'graphql_requests_total',
    'GraphQL requests executed by the view',
    ['outcome']
)

logger = get_logger(__name__)


class PostGraphQLView(GraphQLView):
    """GraphQL view bound to one PostRepository"""

    methods: ClassVar[List[str]] = ['POST']

    def __init__(self, post_repo: PostRepository, **kwargs):
        super().__init__(**kwargs)
        self.post_repo = post_repo

    def dispatch_request(self):
        response = super().dispatch_request()
        if response.status_code == 400:
            GRAPHQL_REQUESTS.labels(outcome='bad_request').inc()
            logger.info(f"Rejected GraphQL request: {response.get_data(as_text=True)}")
        return response

    def get_context(self, request: Request, response: Response) -> ResolversContext:
        return ResolversContext(self.post_repo)

    def parse_http_body(self, request):
        try:
            return super().parse_http_body(request)
        except UnicodeDecodeError as e:
            # answered as a plain-text 400 by the base view
            raise json.JSONDecodeError("Request body is not valid UTF-8", '', 0) from e

    def decode_json(self, data):
        payload = super().decode_json(data)
        if not isinstance(payload, dict):
            raise json.JSONDecodeError("Request body must be a JSON object", str(data), 0)
        return payload

    def process_result(self, request: Request, result):
        response_data = super().process_result(request, result)

        if result.errors:
            GRAPHQL_REQUESTS.labels(outcome='errors').inc()
            logger.warning(
                f"GraphQL result has {len(result.errors)} error(s): "
                f"{'; '.join(e.message for e in result.errors)}"
            )
        else:
            GRAPHQL_REQUESTS.labels(outcome='ok').inc()

        return response_data


def create_graphql_view(post_repo: PostRepository):
    """
    Create the /graphql view function

    Args:
        post_repo: PostRepository backing the resolvers

    Returns:
        Flask view function
    """
    return PostGraphQLView.as_view(
        'graphql',
        post_repo=post_repo,
        schema=schema,
        graphql_ide=None,
        allow_queries_via_get=False
    )
