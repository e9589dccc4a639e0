"""Unit tests for the TypeScript and Flow generators."""

import pytest
from graphql import parse

from graphqlgen.core.extractor import extract_ir
from graphqlgen.core.ir import GenerateArgs, ModelBinding
from graphqlgen.generators import flow, typescript
from graphqlgen.generators.common import (
    INTERFACES_PATH_PLACEHOLDER,
    resolve_model_imports,
    safe_comment,
    upper_first,
)

SCHEMA = """
enum Role {
  ADMIN
  USER
}

type User {
  id: ID!
  name: String
  role: Role!
  posts(first: Int): [Post!]!
}

type Post {
  id: ID!
  title: String!
  author: User!
}

union SearchResult = User | Post

input PostFilter {
  title: String
}

type Query {
  user(id: ID!): User
  posts(filter: PostFilter): [Post]
  search(text: String!): [SearchResult!]!
}
"""


# =============================================================================
# Fixtures
# =============================================================================


def make_args(schema: str = SCHEMA, model_map=None) -> GenerateArgs:
    ir = extract_ir(parse(schema))
    return GenerateArgs(
        types=ir.types,
        enums=ir.enums,
        unions=ir.unions,
        inputs=ir.inputs,
        scalars=ir.scalars,
        context_path="../resolvers/types/Context",
        model_map=model_map or {},
    )


@pytest.fixture
def user_model():
    return {
        "User": ModelBinding(
            absolute_file_path="/project/models.ts",
            import_path_relative_to_output="../models",
            model_type_name="UserModel",
        )
    }


@pytest.fixture
def args(user_model):
    return make_args(model_map=user_model)


# =============================================================================
# Helpers
# =============================================================================


class TestHelpers:
    """Tests for shared generator helpers."""

    def test_upper_first(self):
        assert upper_first("createdAt") == "CreatedAt"
        assert upper_first("") == ""

    def test_safe_comment(self):
        assert safe_comment("multi\nline   text */") == "multi line text * /"
        assert safe_comment(None) == ""

    def test_object_types_exclude_interfaces(self):
        args = make_args("interface Node { id: ID! }\ntype User implements Node { id: ID! }")
        assert [t.name for t in args.types] == ["Node", "User"]
        assert [t.name for t in args.object_types] == ["User"]

    def test_model_imports_grouped_by_path(self):
        model_map = {
            "User": ModelBinding("/p/models.ts", "../models", "UserModel"),
            "Post": ModelBinding("/p/models.ts", "../models", "PostModel"),
        }
        imports, local_names = resolve_model_imports(make_args(model_map=model_map))
        assert len(imports) == 1
        assert imports[0].specifiers == ["UserModel", "PostModel"]
        assert local_names == {"User": "UserModel", "Post": "PostModel"}

    def test_model_name_clash_is_aliased(self):
        model_map = {"User": ModelBinding("/p/models.ts", "../models", "User")}
        imports, local_names = resolve_model_imports(make_args(model_map=model_map))
        assert imports[0].specifiers == ["User as UserModel"]
        assert local_names["User"] == "UserModel"


# =============================================================================
# TypeScript types
# =============================================================================


class TestTypeScriptTypes:
    """Tests for the TypeScript types file."""

    def test_header_and_imports(self, args):
        code = typescript.generate(args)
        assert code.startswith("// Code generated by graphqlgen, DO NOT EDIT.")
        assert "import { GraphQLResolveInfo } from 'graphql'" in code
        assert "import { Context } from '../resolvers/types/Context'" in code
        assert "import { UserModel } from '../models'" in code
        assert "export type { UserModel }" in code

    def test_interface_nullability(self, args):
        code = typescript.generate(args)
        assert "export interface User {\n  id: string\n  name: string | null\n" in code

    def test_enum_and_union(self, args):
        code = typescript.generate(args)
        assert "export type Role = 'ADMIN' | 'USER'" in code
        assert "export type SearchResult = User | Post" in code

    def test_input_interface(self, args):
        assert "export interface PostFilter {\n  title: string | null\n}" in typescript.generate(args)

    def test_list_rendering(self, args):
        code = typescript.generate(args)
        assert "  posts: Array<Post>\n" in code
        assert "  posts: Array<Post | null> | null\n" in code

    def test_resolver_uses_model_as_parent(self, args):
        code = typescript.generate(args)
        assert (
            "export type NameResolver = (parent: UserModel, args: {}, ctx: Context, "
            "info: GraphQLResolveInfo) => string | null | Promise<string | null>"
        ) in code

    def test_resolver_returns_model_for_object_fields(self, args):
        code = typescript.generate(args)
        assert "export type AuthorResolver = (parent: Post," in code
        assert "=> UserModel | Promise<UserModel>" in code

    def test_root_parent_is_undefined(self, args):
        code = typescript.generate(args)
        assert "export type UserResolver = (parent: undefined, args: ArgsUser," in code

    def test_args_interface(self, args):
        code = typescript.generate(args)
        assert "export interface ArgsUser {\n    id: string\n  }" in code
        assert "export interface ArgsPosts {\n    first?: number | null\n  }" in code

    def test_default_resolvers_for_leaf_fields(self, args):
        code = typescript.generate(args)
        assert "    id: (parent: UserModel) => parent.id," in code
        assert "    role: (parent: UserModel) => parent.role," in code
        assert "parent.posts" not in code

    def test_resolvers_interface(self, args):
        code = typescript.generate(args)
        assert "export interface Resolvers {\n  User: UserResolvers.Type\n  Post: PostResolvers.Type\n  Query: QueryResolvers.Type\n}" in code

    def test_custom_scalar_is_any(self):
        code = typescript.generate(make_args("scalar Date\ntype Query { today: Date! }"))
        assert "  today: any\n" in code

    def test_deterministic(self, args):
        assert typescript.generate(args) == typescript.generate(args)


# =============================================================================
# Flow types
# =============================================================================


class TestFlowTypes:
    """Tests for the Flow types file."""

    def test_header_and_imports(self, args):
        code = flow.generate(args)
        assert code.startswith("/* @flow */")
        assert "import type { GraphQLResolveInfo } from 'graphql'" in code
        assert "import type { UserModel } from '../models'" in code

    def test_exact_object_type(self, args):
        code = flow.generate(args)
        assert "export type User = {|\n  id: string,\n  name: ?string,\n" in code

    def test_maybe_lists(self, args):
        code = flow.generate(args)
        assert "  posts: ?Array<?Post>,\n" in code

    def test_prefixed_resolver_types(self, args):
        code = flow.generate(args)
        assert "export const User_defaultResolvers = {" in code
        assert "export type User_Name_Resolver = (parent: UserModel, args: {||}," in code
        assert "export type Query_User_Args = {|\n  id: string,\n|}" in code
        assert "export type Query_User_Resolver = (parent: void, args: Query_User_Args," in code

    def test_resolvers_type(self, args):
        code = flow.generate(args)
        assert "  User: User_Resolvers,\n" in code


# =============================================================================
# Scaffolds
# =============================================================================


class TestTypeScriptScaffold:
    """Tests for TypeScript resolver scaffolds."""

    def test_file_paths(self, args):
        paths = [f.path for f in typescript.scaffold(args)]
        assert paths == ["User.ts", "Post.ts", "Query.ts", "types/Context.ts", "index.ts"]

    def test_scaffolds_are_not_forced(self, args):
        assert not any(f.force for f in typescript.scaffold(args))

    def test_type_file(self, args):
        user = next(f for f in typescript.scaffold(args) if f.path == "User.ts")
        assert (
            f"import {{ UserResolvers, UserModel }} from '{INTERFACES_PATH_PLACEHOLDER}'"
            in user.code
        )
        assert "export const User: UserResolvers.Type = {" in user.code
        assert "  id: (parent: UserModel) => parent.id," in user.code
        assert "  posts: (parent: UserModel, args, ctx, info) => {" in user.code
        assert "throw new Error('Resolver not implemented')" in user.code

    def test_unmapped_type_uses_generated_interface(self, args):
        post = next(f for f in typescript.scaffold(args) if f.path == "Post.ts")
        assert "import { PostResolvers, Post as PostParent } from" in post.code
        assert "  title: (parent: PostParent) => parent.title," in post.code

    def test_root_type_has_only_stubs(self, args):
        query = next(f for f in typescript.scaffold(args) if f.path == "Query.ts")
        assert "import { QueryResolvers } from" in query.code
        assert "  user: (parent, args, ctx, info) => {" in query.code

    def test_placeholder_once_per_file(self, args):
        for f in typescript.scaffold(args):
            if f.path == "types/Context.ts":
                assert INTERFACES_PATH_PLACEHOLDER not in f.code
            else:
                assert f.code.count(INTERFACES_PATH_PLACEHOLDER) == 1

    def test_index(self, args):
        index = next(f for f in typescript.scaffold(args) if f.path == "index.ts")
        assert "import { User } from './User'" in index.code
        assert "export const resolvers: Resolvers = {\n  User,\n  Post,\n  Query,\n}" in index.code

    def test_interfaces_get_no_scaffold(self):
        args = make_args("interface Node { id: ID! }\ntype Query { node: Node }")
        assert [f.path for f in typescript.scaffold(args)] == ["Query.ts", "types/Context.ts", "index.ts"]


class TestFlowScaffold:
    """Tests for Flow resolver scaffolds."""

    def test_file_paths(self, args):
        paths = [f.path for f in flow.scaffold(args)]
        assert paths == ["User.js", "Post.js", "Query.js", "types/Context.js", "index.js"]

    def test_type_file(self, args):
        user = next(f for f in flow.scaffold(args) if f.path == "User.js")
        assert user.code.startswith("/* @flow */")
        assert (
            f"import type {{ User_Resolvers, UserModel }} from '{INTERFACES_PATH_PLACEHOLDER}'"
            in user.code
        )
        assert "export const User: User_Resolvers = {" in user.code
