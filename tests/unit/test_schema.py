"""
Unit Tests for the GraphQL Schema
Executes documents directly against the schema
"""

import pytest

from post_service.graphql_api import schema, ResolversContext
from post_service.repositories import PostRepository


CREATE_POST = """
mutation CreatePost($post: PostCreateInput!) {
    createPost(post: $post) { id title description createdAt updatedAt }
}
"""

UPDATE_POST = """
mutation UpdatePost($post: PostUpdateInput!) {
    updatePost(post: $post) { id title description createdAt updatedAt }
}
"""


class FailingLastPostRepository(PostRepository):
    def get_last_post(self):
        raise RuntimeError("store unavailable")


class FailingListRepository(PostRepository):
    def list_posts(self):
        raise RuntimeError("store unavailable")


class FailingCreateRepository(PostRepository):
    def create_post(self, title, description):
        raise RuntimeError("store unavailable")


def execute(ctx, query, variables=None):
    return schema.execute_sync(query, variable_values=variables, context_value=ctx)


def sdl_lines():
    return {line.strip() for line in schema.as_str().splitlines()}


@pytest.mark.unit
@pytest.mark.graphql
class TestSchemaShape:
    """Test declared types and fields"""

    def test_root_types(self):
        lines = sdl_lines()

        assert 'type query {' in lines
        assert 'type mutation {' in lines
        assert any(line.startswith('post(id: String') and line.endswith('): Post') for line in lines)
        assert 'lastPost: Post' in lines
        assert 'postList: [Post]' in lines
        assert 'createPost(post: PostCreateInput!): Post' in lines
        assert 'updatePost(post: PostUpdateInput!): Post' in lines

    def test_input_types(self):
        lines = sdl_lines()

        assert 'input PostCreateInput {' in lines
        assert 'input PostUpdateInput {' in lines
        assert 'title: String!' in lines

    def test_post_fields_are_nullable(self):
        lines = sdl_lines()

        for field in ('id: String', 'createdAt: DateTime', 'updatedAt: DateTime', 'description: String'):
            assert field in lines
        assert 'createdAt: DateTime!' not in lines


@pytest.mark.unit
@pytest.mark.graphql
class TestSchemaExecution:
    """Test query and mutation execution"""

    def test_create_post(self, resolvers_ctx, post_repo):
        result = execute(resolvers_ctx, CREATE_POST, {'post': {'title': 'T', 'description': 'D'}})

        assert result.errors is None
        created = result.data['createPost']
        assert created['title'] == 'T'
        assert created['createdAt'] == created['updatedAt']
        assert post_repo.get_post(created['id']) is not None

    @pytest.mark.parametrize('post_input', [
        {'title': 'T'},
        {'description': 'D'},
        {'title': None, 'description': 'D'},
        {'title': 5, 'description': 'D'},
    ])
    def test_create_post_validation(self, resolvers_ctx, post_repo, post_input):
        result = execute(resolvers_ctx, CREATE_POST, {'post': post_input})

        assert result.errors
        assert result.data is None
        assert post_repo.count() == 3

    def test_create_post_inline_missing_field(self, resolvers_ctx, post_repo):
        result = execute(resolvers_ctx, 'mutation { createPost(post: {title: "T"}) { id } }')

        assert result.errors
        assert post_repo.count() == 3

    def test_update_post_requires_id(self, resolvers_ctx):
        result = execute(resolvers_ctx, UPDATE_POST, {'post': {'title': 'x'}})

        assert result.errors
        assert result.data is None

    def test_update_post_null_field_is_ignored(self, resolvers_ctx, post_repo):
        record = post_repo.list_posts()[0]

        result = execute(resolvers_ctx, UPDATE_POST, {
            'post': {'id': record['id'], 'title': None, 'description': 'new'}
        })

        assert result.errors is None
        assert result.data['updatePost']['title'] == record['title']
        assert result.data['updatePost']['description'] == 'new'

    def test_update_post_unknown_id(self, resolvers_ctx):
        result = execute(resolvers_ctx, UPDATE_POST, {'post': {'id': 'nope'}})

        assert result.errors is None
        assert result.data == {'updatePost': None}

    def test_post_without_id(self, resolvers_ctx):
        result = execute(resolvers_ctx, '{ post { id } }')

        assert result.errors is None
        assert result.data == {'post': None}

    def test_unknown_field(self, resolvers_ctx):
        result = execute(resolvers_ctx, '{ deletePost { id } }')

        assert result.errors
        assert 'deletePost' in result.errors[0].message

    def test_last_post_on_empty_store(self, empty_repo):
        result = execute(ResolversContext(empty_repo), '{ lastPost { id } }')

        assert result.errors is None
        assert result.data == {'lastPost': None}

    def test_resolver_error_keeps_sibling_fields(self, clock):
        repo = FailingLastPostRepository(clock=clock)
        repo.load_fixtures()

        result = execute(ResolversContext(repo), '{ postList { id } lastPost { id } }')

        assert len(result.data['postList']) == 3
        assert result.data['lastPost'] is None
        assert len(result.errors) == 1
        assert result.errors[0].path == ['lastPost']

    def test_failing_post_list_keeps_sibling_fields(self, clock):
        repo = FailingListRepository(clock=clock)
        repo.load_fixtures()

        result = execute(ResolversContext(repo), '{ lastPost { title } postList { id } }')

        assert result.data == {'lastPost': {'title': 'Post 1 title'}, 'postList': None}
        assert [e.path for e in result.errors] == [['postList']]

    def test_failing_create_keeps_later_mutations(self, clock):
        repo = FailingCreateRepository(clock=clock)
        repo.load_fixtures()
        target = repo.list_posts()[0]

        result = execute(ResolversContext(repo), """
            mutation($id: String!) {
                createPost(post: {title: "T", description: "D"}) { id }
                updatePost(post: {id: $id, title: "X"}) { title }
            }
        """, {'id': target['id']})

        assert result.data == {'createPost': None, 'updatePost': {'title': 'X'}}
        assert [e.path for e in result.errors] == [['createPost']]
        assert repo.get_post(target['id'])['title'] == 'X'

    def test_post_with_non_string_variable_is_rejected(self, resolvers_ctx):
        result = execute(resolvers_ctx, 'query($id: String) { post(id: $id) { id } }', {'id': 5})

        assert result.data is None
        assert len(result.errors) == 1

    def test_post_with_non_string_literal_is_rejected(self, resolvers_ctx):
        result = execute(resolvers_ctx, '{ post(id: 5) { id } }')

        assert result.data is None
        assert result.errors
