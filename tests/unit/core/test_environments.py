"""Unit tests for runtime environment definitions.

Tests the deletion predicates of the built-in environments and the
registry lookups.
"""

import pytest
from pkgtailor.core.environments import (
    AWS_LAMBDA_NODE4,
    AWS_LAMBDA_NODE6,
    ENVIRONMENTS,
    EnvironmentDefinition,
    get_environment,
    get_environment_by_name,
)
from pkgtailor.filesystem.scanner import normalize_path


class TestAbiTagRule:
    """Tests for the ABI tag part of the deletion predicate."""

    def test_node4_keeps_abi_46(self) -> None:
        """AWS Lambda Node 4.x keeps *_46.node binaries."""
        assert AWS_LAMBDA_NODE4.should_delete("/agent/bin/linux-x86-64/addon_46.node") is False

    @pytest.mark.parametrize("tag", ["44", "48", "51", "57", "99", "11"])
    def test_node4_deletes_other_tags(self, tag: str) -> None:
        """AWS Lambda Node 4.x deletes binaries built for other ABIs."""
        assert AWS_LAMBDA_NODE4.should_delete(f"/agent/bin/linux-x86-64/addon_{tag}.node")

    def test_node6_keeps_abi_48(self) -> None:
        """AWS Lambda Node 6.x keeps *_48.node binaries."""
        assert AWS_LAMBDA_NODE6.should_delete("/agent/bin/linux-x86-64/addon_48.node") is False

    @pytest.mark.parametrize("tag", ["44", "46", "51", "57", "99"])
    def test_node6_deletes_other_tags(self, tag: str) -> None:
        """AWS Lambda Node 6.x deletes binaries built for other ABIs."""
        assert AWS_LAMBDA_NODE6.should_delete(f"/agent/bin/linux-x86-64/addon_{tag}.node")

    @pytest.mark.parametrize(
        "path",
        [
            "/agent/package.json",
            "/agent/bin/linux-x86-64/liboneagentloader.so",
            "/agent/bin/linux-x86-64/addon.node",
            "/agent/bin/linux-x86-64/addon_48.node.bak",
            "/agent/bin/linux-x86-64/addon_4.node",
        ],
    )
    def test_untagged_files_are_kept(self, path: str) -> None:
        """Files without a trailing _NN.node tag are not binaries to prune."""
        for env in ENVIRONMENTS:
            assert env.should_delete(path) is False


class TestThirtyTwoBitRule:
    """Tests for the environment independent 32-bit path rule."""

    @pytest.mark.parametrize(
        "path",
        [
            "/agent/bin/linux-x86-32/addon_46.node",
            "/agent/bin/linux-x86-32/addon_48.node",
            "/agent/bin/linux-x86-32/libloader.so",
            "/agent/lib/index.js",
            "/agent/bin/lib/addon_46.node",
        ],
    )
    def test_deleted_for_every_environment(self, path: str) -> None:
        """Files directly below lib/ or linux-x86-32/ are always deleted."""
        for env in ENVIRONMENTS:
            assert env.should_delete(path) is True

    def test_nested_below_lib_is_not_matched(self) -> None:
        """Only files directly inside the leaf directory match."""
        assert AWS_LAMBDA_NODE4.should_delete("/agent/lib/sub/index.js") is False

    def test_similar_directory_names_are_not_matched(self) -> None:
        """Directory names merely containing 'lib' do not match."""
        assert AWS_LAMBDA_NODE4.should_delete("/agent/mylib2/index.js") is False
        assert AWS_LAMBDA_NODE4.should_delete("/agent/libs/index.js") is False

    def test_windows_path_normalized_before_matching(self) -> None:
        """A backslash, mixed case Windows path matches after normalization."""
        normalized = normalize_path("C:\\pkg\\LIB\\x.node", platform="win32")

        assert normalized == "c:/pkg/lib/x.node"
        assert AWS_LAMBDA_NODE4.should_delete(normalized) is True
        assert AWS_LAMBDA_NODE6.should_delete(normalized) is True


class TestEnvironmentDefinition:
    """Tests for EnvironmentDefinition construction."""

    def test_custom_environment(self) -> None:
        """A new environment only needs a different kept tag."""
        env = EnvironmentDefinition(
            key="node8", name="Node 8.x", description="Node 8", kept_abi_tag="57"
        )

        assert env.should_delete("/a/addon_57.node") is False
        assert env.should_delete("/a/addon_46.node") is True
        assert env.should_delete("/a/addon_59.node") is True

    @pytest.mark.parametrize("tag", ["4", "466", "4a", ""])
    def test_invalid_abi_tag_rejected(self, tag: str) -> None:
        """ABI tags must be exactly two digits."""
        with pytest.raises(ValueError, match="two digits"):
            EnvironmentDefinition(key="x", name="x", description="x", kept_abi_tag=tag)

    def test_is_immutable(self) -> None:
        """Environment definitions cannot be modified."""
        with pytest.raises(AttributeError):
            AWS_LAMBDA_NODE4.kept_abi_tag = "48"  # type: ignore[misc]


class TestRegistry:
    """Tests for environment lookups."""

    def test_builtin_environments(self) -> None:
        """Exactly the two AWS Lambda environments are registered."""
        assert [env.key for env in ENVIRONMENTS] == ["aws-lambda-v4", "aws-lambda-v6"]

    def test_get_environment(self) -> None:
        """Environments are found by key."""
        assert get_environment("aws-lambda-v6") is AWS_LAMBDA_NODE6
        assert get_environment("unknown") is None

    def test_get_environment_by_name(self) -> None:
        """Environments are found by display name."""
        assert get_environment_by_name("AWS Lambda with Node 4.x") is AWS_LAMBDA_NODE4
        assert get_environment_by_name("aws-lambda-v4") is None
