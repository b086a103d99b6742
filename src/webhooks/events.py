"""Pydantic models for GitHub webhook event payloads.

Every field is optional. GitHub omits keys freely between event actions and
API versions, and an empty JSON object must decode into any event model.
Keys that are not modelled here are kept on the instance as extra fields.
"""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class GitHubModel(BaseModel):
    """Base class for objects embedded in webhook payloads."""

    model_config = ConfigDict(extra="allow")


# Shared payload objects


class User(GitHubModel):
    """GitHub user, bot or organization account."""

    id: int | None = None
    node_id: str | None = None
    login: str | None = None
    name: str | None = None
    email: str | None = None
    type: str | None = None
    site_admin: bool | None = None
    avatar_url: str | None = None
    html_url: str | None = None


class Organization(GitHubModel):
    """GitHub organization."""

    id: int | None = None
    node_id: str | None = None
    login: str | None = None
    description: str | None = None
    url: str | None = None
    html_url: str | None = None
    avatar_url: str | None = None


class Enterprise(GitHubModel):
    """GitHub enterprise account."""

    id: int | None = None
    node_id: str | None = None
    slug: str | None = None
    name: str | None = None
    description: str | None = None
    html_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Repository(GitHubModel):
    """GitHub repository information."""

    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    full_name: str | None = None
    owner: User | None = None
    private: bool | None = None
    visibility: str | None = None
    fork: bool | None = None
    archived: bool | None = None
    disabled: bool | None = None
    description: str | None = None
    homepage: str | None = None
    language: str | None = None
    topics: list[str] | None = None
    default_branch: str | None = None
    master_branch: str | None = None
    url: str | None = None
    html_url: str | None = None
    size: int | None = None
    stargazers_count: int | None = None
    watchers_count: int | None = None
    forks_count: int | None = None
    open_issues_count: int | None = None
    # push payloads send these as Unix timestamps, everything else as ISO 8601
    created_at: datetime | None = None
    updated_at: datetime | None = None
    pushed_at: datetime | None = None


class Installation(GitHubModel):
    """GitHub App installation."""

    id: int | None = None
    node_id: str | None = None
    app_id: int | None = None
    app_slug: str | None = None
    account: User | None = None
    target_id: int | None = None
    target_type: str | None = None
    repository_selection: str | None = None
    permissions: dict[str, str] | None = None
    events: list[str] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    suspended_at: datetime | None = None


class Team(GitHubModel):
    """Organization team."""

    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    privacy: str | None = None
    permission: str | None = None
    html_url: str | None = None
    parent: "Team | None" = None


class Label(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    color: str | None = None
    description: str | None = None
    default: bool | None = None
    url: str | None = None


class Milestone(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    number: int | None = None
    title: str | None = None
    description: str | None = None
    state: str | None = None
    creator: User | None = None
    open_issues: int | None = None
    closed_issues: int | None = None
    html_url: str | None = None
    due_on: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None


class Issue(GitHubModel):
    """Issue, or the issue half of a pull request."""

    id: int | None = None
    node_id: str | None = None
    number: int | None = None
    title: str | None = None
    body: str | None = None
    state: str | None = None
    state_reason: str | None = None
    locked: bool | None = None
    user: User | None = None
    labels: list[Label] | None = None
    assignee: User | None = None
    assignees: list[User] | None = None
    milestone: Milestone | None = None
    comments: int | None = None
    html_url: str | None = None
    # Present only when the issue is a pull request
    pull_request: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None


class Comment(GitHubModel):
    """Comment on an issue, commit, discussion or pull request."""

    id: int | None = None
    node_id: str | None = None
    body: str | None = None
    user: User | None = None
    author_association: str | None = None
    html_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class IssueComment(Comment):
    issue_url: str | None = None


class CommitComment(Comment):
    commit_id: str | None = None
    path: str | None = None
    position: int | None = None
    line: int | None = None


class ReviewComment(Comment):
    """Comment on a pull request diff."""

    pull_request_review_id: int | None = None
    diff_hunk: str | None = None
    path: str | None = None
    position: int | None = None
    line: int | None = None
    side: str | None = None
    commit_id: str | None = None
    original_commit_id: str | None = None
    in_reply_to_id: int | None = None


class PullRequestBranch(GitHubModel):
    """Head or base of a pull request."""

    label: str | None = None
    ref: str | None = None
    sha: str | None = None
    user: User | None = None
    repo: Repository | None = None


class PullRequest(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    number: int | None = None
    title: str | None = None
    body: str | None = None
    state: str | None = None
    draft: bool | None = None
    locked: bool | None = None
    merged: bool | None = None
    mergeable: bool | None = None
    merge_commit_sha: str | None = None
    user: User | None = None
    head: PullRequestBranch | None = None
    base: PullRequestBranch | None = None
    labels: list[Label] | None = None
    assignees: list[User] | None = None
    requested_reviewers: list[User] | None = None
    requested_teams: list[Team] | None = None
    milestone: Milestone | None = None
    commits: int | None = None
    additions: int | None = None
    deletions: int | None = None
    changed_files: int | None = None
    html_url: str | None = None
    diff_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None
    merged_at: datetime | None = None


class PullRequestReview(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    user: User | None = None
    body: str | None = None
    state: str | None = None
    commit_id: str | None = None
    author_association: str | None = None
    html_url: str | None = None
    submitted_at: datetime | None = None


class CommitAuthor(GitHubModel):
    """Author or committer of a commit. Need not correspond to a GitHub user."""

    name: str | None = None
    email: str | None = None
    username: str | None = None
    date: datetime | None = None


class Commit(GitHubModel):
    """Commit as listed in push and merge group payloads."""

    id: str | None = None
    tree_id: str | None = None
    message: str | None = None
    url: str | None = None
    distinct: bool | None = None
    author: CommitAuthor | None = None
    committer: CommitAuthor | None = None
    added: list[str] | None = None
    removed: list[str] | None = None
    modified: list[str] | None = None
    timestamp: datetime | None = None


class CheckSuite(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    head_branch: str | None = None
    head_sha: str | None = None
    status: str | None = None
    conclusion: str | None = None
    before: str | None = None
    after: str | None = None
    app: dict[str, Any] | None = None
    pull_requests: list[dict[str, Any]] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CheckRun(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    head_sha: str | None = None
    external_id: str | None = None
    status: str | None = None
    conclusion: str | None = None
    html_url: str | None = None
    details_url: str | None = None
    output: dict[str, Any] | None = None
    check_suite: CheckSuite | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None


class Deployment(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    sha: str | None = None
    ref: str | None = None
    task: str | None = None
    environment: str | None = None
    description: str | None = None
    # Free-form, sent either as an object or as a string
    payload: Any = None
    creator: User | None = None
    statuses_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DeploymentStatus(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    state: str | None = None
    description: str | None = None
    environment: str | None = None
    target_url: str | None = None
    log_url: str | None = None
    creator: User | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Release(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    tag_name: str | None = None
    target_commitish: str | None = None
    name: str | None = None
    body: str | None = None
    draft: bool | None = None
    prerelease: bool | None = None
    author: User | None = None
    assets: list[dict[str, Any]] | None = None
    html_url: str | None = None
    created_at: datetime | None = None
    published_at: datetime | None = None


class Hook(GitHubModel):
    """Webhook configuration."""

    id: int | None = None
    type: str | None = None
    name: str | None = None
    active: bool | None = None
    events: list[str] | None = None
    config: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Discussion(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    number: int | None = None
    title: str | None = None
    body: str | None = None
    state: str | None = None
    locked: bool | None = None
    category: dict[str, Any] | None = None
    user: User | None = None
    answer_html_url: str | None = None
    html_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class GollumPage(GitHubModel):
    """Wiki page touched by a gollum event."""

    page_name: str | None = None
    title: str | None = None
    summary: str | None = None
    action: str | None = None
    sha: str | None = None
    html_url: str | None = None


class MergeGroup(GitHubModel):
    head_sha: str | None = None
    head_ref: str | None = None
    base_sha: str | None = None
    base_ref: str | None = None
    head_commit: Commit | None = None


class Package(GitHubModel):
    id: int | None = None
    name: str | None = None
    namespace: str | None = None
    description: str | None = None
    ecosystem: str | None = None
    package_type: str | None = None
    html_url: str | None = None
    owner: User | None = None
    package_version: dict[str, Any] | None = None
    registry: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Project(GitHubModel):
    """Classic project board."""

    id: int | None = None
    node_id: str | None = None
    number: int | None = None
    name: str | None = None
    body: str | None = None
    state: str | None = None
    creator: User | None = None
    html_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProjectCard(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    note: str | None = None
    column_id: int | None = None
    archived: bool | None = None
    creator: User | None = None
    content_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProjectColumn(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProjectV2(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    number: int | None = None
    title: str | None = None
    description: str | None = None
    short_description: str | None = None
    public: bool | None = None
    owner: User | None = None
    creator: User | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None


class ProjectV2Item(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    project_node_id: str | None = None
    content_node_id: str | None = None
    content_type: str | None = None
    creator: User | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    archived_at: datetime | None = None


class Step(GitHubModel):
    """GitHub workflow step information."""

    name: str | None = None
    status: str | None = None
    conclusion: str | None = None
    number: int | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None


class WorkflowRun(GitHubModel):
    """GitHub workflow run information."""

    id: int | None = None
    name: str | None = None
    workflow_id: int | None = None
    head_branch: str | None = None
    head_sha: str | None = None
    status: str | None = None
    conclusion: str | None = None
    run_number: int | None = None
    run_attempt: int | None = None
    event: str | None = None
    html_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    run_started_at: datetime | None = None


class WorkflowJob(GitHubModel):
    """GitHub workflow job information."""

    id: int | None = None
    name: str | None = None
    run_id: int | None = None
    run_url: str | None = None
    workflow_name: str | None = None
    head_branch: str | None = None
    head_sha: str | None = None
    status: str | None = None
    conclusion: str | None = None
    html_url: str | None = None
    runner_name: str | None = None
    runner_group_name: str | None = None
    labels: list[str] = Field(default_factory=list)
    steps: list[Step] = Field(
        default_factory=list,
        description="List of job steps with their execution status and timing",
    )
    created_at: datetime | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None


# Event payloads


class WebhookEvent(GitHubModel):
    """Base class of every webhook event payload.

    ``event_type`` is the X-GitHub-Event value the payload is delivered under.
    The remaining fields are the envelope GitHub attaches to most deliveries.
    """

    event_type: ClassVar[str] = ""

    sender: User | None = None
    repository: Repository | None = None
    organization: Organization | None = None
    installation: Installation | None = None
    enterprise: Enterprise | None = None


class BranchProtectionRuleEvent(WebhookEvent):
    event_type: ClassVar[str] = "branch_protection_rule"

    action: str | None = None
    rule: dict[str, Any] | None = None
    changes: dict[str, Any] | None = None


class CheckRunEvent(WebhookEvent):
    event_type: ClassVar[str] = "check_run"

    action: str | None = None
    check_run: CheckRun | None = None
    requested_action: dict[str, Any] | None = None


class CheckSuiteEvent(WebhookEvent):
    event_type: ClassVar[str] = "check_suite"

    action: str | None = None
    check_suite: CheckSuite | None = None


class CodeScanningAlertEvent(WebhookEvent):
    event_type: ClassVar[str] = "code_scanning_alert"

    action: str | None = None
    alert: dict[str, Any] | None = None
    ref: str | None = None
    commit_oid: str | None = None


class CommitCommentEvent(WebhookEvent):
    event_type: ClassVar[str] = "commit_comment"

    action: str | None = None
    comment: CommitComment | None = None


class ContentReferenceEvent(WebhookEvent):
    event_type: ClassVar[str] = "content_reference"

    action: str | None = None
    content_reference: dict[str, Any] | None = None


class CreateEvent(WebhookEvent):
    """A branch or tag was created."""

    event_type: ClassVar[str] = "create"

    ref: str | None = None
    ref_type: str | None = None
    master_branch: str | None = None
    description: str | None = None
    pusher_type: str | None = None


class DeleteEvent(WebhookEvent):
    """A branch or tag was deleted."""

    event_type: ClassVar[str] = "delete"

    ref: str | None = None
    ref_type: str | None = None
    pusher_type: str | None = None


class DependabotAlertEvent(WebhookEvent):
    event_type: ClassVar[str] = "dependabot_alert"

    action: str | None = None
    alert: dict[str, Any] | None = None


class DeployKeyEvent(WebhookEvent):
    event_type: ClassVar[str] = "deploy_key"

    action: str | None = None
    key: dict[str, Any] | None = None


class DeploymentEvent(WebhookEvent):
    event_type: ClassVar[str] = "deployment"

    action: str | None = None
    deployment: Deployment | None = None
    workflow: dict[str, Any] | None = None
    workflow_run: WorkflowRun | None = None


class DeploymentProtectionRuleEvent(WebhookEvent):
    event_type: ClassVar[str] = "deployment_protection_rule"

    action: str | None = None
    environment: str | None = None
    event: str | None = None
    deployment_callback_url: str | None = None
    deployment: Deployment | None = None
    pull_requests: list[PullRequest] | None = None


class DeploymentReviewEvent(WebhookEvent):
    event_type: ClassVar[str] = "deployment_review"

    action: str | None = None
    approver: User | None = None
    comment: str | None = None
    environment: str | None = None
    reviewers: list[dict[str, Any]] | None = None
    requester: User | None = None
    since: str | None = None
    workflow_run: WorkflowRun | None = None
    workflow_job_run: dict[str, Any] | None = None
    workflow_job_runs: list[dict[str, Any]] | None = None


class DeploymentStatusEvent(WebhookEvent):
    event_type: ClassVar[str] = "deployment_status"

    action: str | None = None
    deployment: Deployment | None = None
    deployment_status: DeploymentStatus | None = None
    check_run: CheckRun | None = None
    workflow_run: WorkflowRun | None = None


class DiscussionEvent(WebhookEvent):
    event_type: ClassVar[str] = "discussion"

    action: str | None = None
    discussion: Discussion | None = None
    changes: dict[str, Any] | None = None


class DiscussionCommentEvent(WebhookEvent):
    event_type: ClassVar[str] = "discussion_comment"

    action: str | None = None
    discussion: Discussion | None = None
    comment: Comment | None = None


class ForkEvent(WebhookEvent):
    event_type: ClassVar[str] = "fork"

    forkee: Repository | None = None


class GitHubAppAuthorizationEvent(WebhookEvent):
    event_type: ClassVar[str] = "github_app_authorization"

    action: str | None = None


class GollumEvent(WebhookEvent):
    """Wiki pages were created or updated."""

    event_type: ClassVar[str] = "gollum"

    pages: list[GollumPage] | None = None


class InstallationEvent(WebhookEvent):
    event_type: ClassVar[str] = "installation"

    action: str | None = None
    repositories: list[Repository] | None = None
    requester: User | None = None


class InstallationRepositoriesEvent(WebhookEvent):
    event_type: ClassVar[str] = "installation_repositories"

    action: str | None = None
    repository_selection: str | None = None
    repositories_added: list[Repository] | None = None
    repositories_removed: list[Repository] | None = None


class InstallationTargetEvent(WebhookEvent):
    event_type: ClassVar[str] = "installation_target"

    action: str | None = None
    account: User | None = None
    target_type: str | None = None
    changes: dict[str, Any] | None = None


class IssueCommentEvent(WebhookEvent):
    """Comment activity on an issue or pull request."""

    event_type: ClassVar[str] = "issue_comment"

    action: str | None = None
    issue: Issue | None = None
    comment: IssueComment | None = None
    changes: dict[str, Any] | None = None


class IssuesEvent(WebhookEvent):
    event_type: ClassVar[str] = "issues"

    action: str | None = None
    issue: Issue | None = None
    assignee: User | None = None
    label: Label | None = None
    milestone: Milestone | None = None
    changes: dict[str, Any] | None = None


class LabelEvent(WebhookEvent):
    event_type: ClassVar[str] = "label"

    action: str | None = None
    label: Label | None = None
    changes: dict[str, Any] | None = None


class MarketplacePurchaseEvent(WebhookEvent):
    event_type: ClassVar[str] = "marketplace_purchase"

    action: str | None = None
    effective_date: datetime | None = None
    marketplace_purchase: dict[str, Any] | None = None
    previous_marketplace_purchase: dict[str, Any] | None = None


class MemberEvent(WebhookEvent):
    """A collaborator was added to, removed from or changed on a repository."""

    event_type: ClassVar[str] = "member"

    action: str | None = None
    member: User | None = None
    changes: dict[str, Any] | None = None


class MembershipEvent(WebhookEvent):
    event_type: ClassVar[str] = "membership"

    action: str | None = None
    scope: str | None = None
    member: User | None = None
    team: Team | None = None


class MergeGroupEvent(WebhookEvent):
    event_type: ClassVar[str] = "merge_group"

    action: str | None = None
    reason: str | None = None
    merge_group: MergeGroup | None = None


class MetaEvent(WebhookEvent):
    """The webhook itself was deleted."""

    event_type: ClassVar[str] = "meta"

    action: str | None = None
    hook_id: int | None = None
    hook: Hook | None = None


class MilestoneEvent(WebhookEvent):
    event_type: ClassVar[str] = "milestone"

    action: str | None = None
    milestone: Milestone | None = None
    changes: dict[str, Any] | None = None


class OrgBlockEvent(WebhookEvent):
    event_type: ClassVar[str] = "org_block"

    action: str | None = None
    blocked_user: User | None = None


class OrganizationEvent(WebhookEvent):
    event_type: ClassVar[str] = "organization"

    action: str | None = None
    invitation: dict[str, Any] | None = None
    membership: dict[str, Any] | None = None
    changes: dict[str, Any] | None = None


class PackageEvent(WebhookEvent):
    event_type: ClassVar[str] = "package"

    action: str | None = None
    package: Package | None = None


class PageBuildEvent(WebhookEvent):
    event_type: ClassVar[str] = "page_build"

    id: int | None = None
    build: dict[str, Any] | None = None


class PersonalAccessTokenRequestEvent(WebhookEvent):
    event_type: ClassVar[str] = "personal_access_token_request"

    action: str | None = None
    personal_access_token_request: dict[str, Any] | None = None


class PingEvent(WebhookEvent):
    """Sent when a webhook is first configured."""

    event_type: ClassVar[str] = "ping"

    zen: str | None = None
    hook_id: int | None = None
    hook: Hook | None = None


class ProjectEvent(WebhookEvent):
    event_type: ClassVar[str] = "project"

    action: str | None = None
    project: Project | None = None
    changes: dict[str, Any] | None = None


class ProjectCardEvent(WebhookEvent):
    event_type: ClassVar[str] = "project_card"

    action: str | None = None
    project_card: ProjectCard | None = None
    after_id: int | None = None
    changes: dict[str, Any] | None = None


class ProjectColumnEvent(WebhookEvent):
    event_type: ClassVar[str] = "project_column"

    action: str | None = None
    project_column: ProjectColumn | None = None
    after_id: int | None = None
    changes: dict[str, Any] | None = None


class ProjectV2Event(WebhookEvent):
    event_type: ClassVar[str] = "projects_v2"

    action: str | None = None
    projects_v2: ProjectV2 | None = None
    changes: dict[str, Any] | None = None


class ProjectV2ItemEvent(WebhookEvent):
    event_type: ClassVar[str] = "projects_v2_item"

    action: str | None = None
    projects_v2_item: ProjectV2Item | None = None
    changes: dict[str, Any] | None = None


class PublicEvent(WebhookEvent):
    """A private repository was made public."""

    event_type: ClassVar[str] = "public"


class _PullRequestActivity(WebhookEvent):
    action: str | None = None
    number: int | None = None
    pull_request: PullRequest | None = None
    assignee: User | None = None
    label: Label | None = None
    requested_reviewer: User | None = None
    requested_team: Team | None = None
    # Only set for "synchronize"
    before: str | None = None
    after: str | None = None
    changes: dict[str, Any] | None = None


class PullRequestEvent(_PullRequestActivity):
    event_type: ClassVar[str] = "pull_request"


class PullRequestTargetEvent(_PullRequestActivity):
    """Pull request activity, delivered in the context of the base repository."""

    event_type: ClassVar[str] = "pull_request_target"


class PullRequestReviewEvent(WebhookEvent):
    event_type: ClassVar[str] = "pull_request_review"

    action: str | None = None
    review: PullRequestReview | None = None
    pull_request: PullRequest | None = None
    changes: dict[str, Any] | None = None


class PullRequestReviewCommentEvent(WebhookEvent):
    event_type: ClassVar[str] = "pull_request_review_comment"

    action: str | None = None
    comment: ReviewComment | None = None
    pull_request: PullRequest | None = None
    changes: dict[str, Any] | None = None


class PullRequestReviewThreadEvent(WebhookEvent):
    event_type: ClassVar[str] = "pull_request_review_thread"

    action: str | None = None
    thread: dict[str, Any] | None = None
    pull_request: PullRequest | None = None


class PushEvent(WebhookEvent):
    """Commits were pushed to a branch or tag."""

    event_type: ClassVar[str] = "push"

    ref: str | None = None
    before: str | None = None
    after: str | None = None
    base_ref: str | None = None
    created: bool | None = None
    deleted: bool | None = None
    forced: bool | None = None
    compare: str | None = None
    commits: list[Commit] | None = None
    head_commit: Commit | None = None
    pusher: CommitAuthor | None = None


class ReleaseEvent(WebhookEvent):
    event_type: ClassVar[str] = "release"

    action: str | None = None
    release: Release | None = None
    changes: dict[str, Any] | None = None


class RepositoryEvent(WebhookEvent):
    event_type: ClassVar[str] = "repository"

    action: str | None = None
    changes: dict[str, Any] | None = None


class RepositoryDispatchEvent(WebhookEvent):
    event_type: ClassVar[str] = "repository_dispatch"

    action: str | None = None
    branch: str | None = None
    client_payload: dict[str, Any] | None = None


class RepositoryImportEvent(WebhookEvent):
    event_type: ClassVar[str] = "repository_import"

    status: str | None = None


class RepositoryRulesetEvent(WebhookEvent):
    event_type: ClassVar[str] = "repository_ruleset"

    action: str | None = None
    repository_ruleset: dict[str, Any] | None = None
    changes: dict[str, Any] | None = None


class RepositoryVulnerabilityAlertEvent(WebhookEvent):
    event_type: ClassVar[str] = "repository_vulnerability_alert"

    action: str | None = None
    alert: dict[str, Any] | None = None


class SecretScanningAlertEvent(WebhookEvent):
    event_type: ClassVar[str] = "secret_scanning_alert"

    action: str | None = None
    alert: dict[str, Any] | None = None


class SecurityAdvisoryEvent(WebhookEvent):
    event_type: ClassVar[str] = "security_advisory"

    action: str | None = None
    security_advisory: dict[str, Any] | None = None


class SecurityAndAnalysisEvent(WebhookEvent):
    event_type: ClassVar[str] = "security_and_analysis"

    changes: dict[str, Any] | None = None


class SponsorshipEvent(WebhookEvent):
    event_type: ClassVar[str] = "sponsorship"

    action: str | None = None
    effective_date: str | None = None
    sponsorship: dict[str, Any] | None = None
    changes: dict[str, Any] | None = None


class StarEvent(WebhookEvent):
    event_type: ClassVar[str] = "star"

    action: str | None = None
    starred_at: datetime | None = None


class StatusEvent(WebhookEvent):
    """The status of a commit changed."""

    event_type: ClassVar[str] = "status"

    id: int | None = None
    sha: str | None = None
    name: str | None = None
    state: str | None = None
    context: str | None = None
    description: str | None = None
    target_url: str | None = None
    commit: dict[str, Any] | None = None
    branches: list[dict[str, Any]] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TeamEvent(WebhookEvent):
    event_type: ClassVar[str] = "team"

    action: str | None = None
    team: Team | None = None
    changes: dict[str, Any] | None = None


class TeamAddEvent(WebhookEvent):
    event_type: ClassVar[str] = "team_add"

    team: Team | None = None


class UserEvent(WebhookEvent):
    event_type: ClassVar[str] = "user"

    action: str | None = None
    user: User | None = None


class WatchEvent(WebhookEvent):
    """Someone starred a repository. The name predates stars."""

    event_type: ClassVar[str] = "watch"

    action: str | None = None


class WorkflowDispatchEvent(WebhookEvent):
    event_type: ClassVar[str] = "workflow_dispatch"

    ref: str | None = None
    workflow: str | None = None
    inputs: dict[str, Any] | None = None


class WorkflowJobEvent(WebhookEvent):
    """GitHub workflow_job webhook event payload."""

    event_type: ClassVar[str] = "workflow_job"

    action: str | None = None
    workflow_job: WorkflowJob | None = None
    deployment: Deployment | None = None


class WorkflowRunEvent(WebhookEvent):
    """GitHub workflow_run webhook event payload."""

    event_type: ClassVar[str] = "workflow_run"

    action: str | None = None
    workflow_run: WorkflowRun | None = None
    workflow: dict[str, Any] | None = None


# Every event model known to the default registry
EVENT_MODELS: tuple[type[WebhookEvent], ...] = (
    BranchProtectionRuleEvent,
    CheckRunEvent,
    CheckSuiteEvent,
    CodeScanningAlertEvent,
    CommitCommentEvent,
    ContentReferenceEvent,
    CreateEvent,
    DeleteEvent,
    DependabotAlertEvent,
    DeployKeyEvent,
    DeploymentEvent,
    DeploymentProtectionRuleEvent,
    DeploymentReviewEvent,
    DeploymentStatusEvent,
    DiscussionEvent,
    DiscussionCommentEvent,
    ForkEvent,
    GitHubAppAuthorizationEvent,
    GollumEvent,
    InstallationEvent,
    InstallationRepositoriesEvent,
    InstallationTargetEvent,
    IssueCommentEvent,
    IssuesEvent,
    LabelEvent,
    MarketplacePurchaseEvent,
    MemberEvent,
    MembershipEvent,
    MergeGroupEvent,
    MetaEvent,
    MilestoneEvent,
    OrgBlockEvent,
    OrganizationEvent,
    PackageEvent,
    PageBuildEvent,
    PersonalAccessTokenRequestEvent,
    PingEvent,
    ProjectEvent,
    ProjectCardEvent,
    ProjectColumnEvent,
    ProjectV2Event,
    ProjectV2ItemEvent,
    PublicEvent,
    PullRequestEvent,
    PullRequestReviewEvent,
    PullRequestReviewCommentEvent,
    PullRequestReviewThreadEvent,
    PullRequestTargetEvent,
    PushEvent,
    ReleaseEvent,
    RepositoryEvent,
    RepositoryDispatchEvent,
    RepositoryImportEvent,
    RepositoryRulesetEvent,
    RepositoryVulnerabilityAlertEvent,
    SecretScanningAlertEvent,
    SecurityAdvisoryEvent,
    SecurityAndAnalysisEvent,
    SponsorshipEvent,
    StarEvent,
    StatusEvent,
    TeamEvent,
    TeamAddEvent,
    UserEvent,
    WatchEvent,
    WorkflowDispatchEvent,
    WorkflowJobEvent,
    WorkflowRunEvent,
)
