from pytest_archon import archrule


def test_core_independence() -> None:
    """
    Core module should not import from any other pagequery package.
    It is the foundation and must remain independent of stores and features.
    """
    (
        archrule("core_is_independent")
        .match("pagequery_core*")
        .should_not_import("pagequery_specifications*")
        .should_not_import("pagequery_pagination*")
        .should_not_import("pagequery_persistence_sqlalchemy*")
        .should_not_import("pagequery_filtering*")
        .should_not_import("pagequery_members*")
        .should_not_import("sqlalchemy*")
        .check("pagequery_core")
    )


def test_domain_isolation() -> None:
    """
    Domain layer should be self-contained.
    It must not import from adapters or ports.
    """
    (
        archrule("domain_isolation")
        .match("pagequery_core.domain*")
        .should_not_import("pagequery_core.adapters*")
        .should_not_import("pagequery_core.ports*")
        .check("pagequery_core")
    )


def test_primitives_isolation() -> None:
    """
    Primitives layer is the lowest level.
    It must not import from domain, adapters or ports.
    """
    (
        archrule("primitives_isolation")
        .match("pagequery_core.primitives*")
        .should_not_import("pagequery_core.domain*")
        .should_not_import("pagequery_core.adapters*")
        .should_not_import("pagequery_core.ports*")
        .check("pagequery_core")
    )


def test_ports_layering() -> None:
    """
    Ports (interfaces) should not depend on Adapters (implementations).
    """
    (
        archrule("ports_layering")
        .match("pagequery_core.ports*")
        .should_not_import("pagequery_core.adapters*")
        .check("pagequery_core")
    )
