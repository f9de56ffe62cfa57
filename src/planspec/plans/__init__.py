"""Plan and spec documents under docs/plans and docs/specs.

A plan is a markdown file with a short frontmatter block, an idea, an
optional implementation list, and a Required Specs section (see
planspec.specblock). A spec is a markdown file whose header declares its
scope: ``repo`` specs apply to every plan, ``feature`` specs to one.
"""

PLAN_STATUSES = {"active", "completed", "abandoned"}
SPEC_SCOPES = {"repo", "feature"}
