"""Tool registry and routing system for MCP GitHub Server"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from mcp.types import TextContent, Tool
from pydantic import BaseModel, ValidationError

from ..error_handling import InvalidInputError
from ..github import api, contents, publish, refs
from ..github.client import GitHubClient
from ..github.models import (
    AddIssueComment,
    CreateBranch,
    CreateGist,
    CreateIssue,
    CreateOrUpdateFile,
    CreatePullRequest,
    CreateRepository,
    ForkRepository,
    GetFileContents,
    GetIssue,
    ListCommits,
    ListIssues,
    PushFiles,
    SearchCode,
    SearchGists,
    SearchIssues,
    SearchRepositories,
    SearchUsers,
    UpdateIssue,
)

logger = logging.getLogger(__name__)


class GitHubTools(str, Enum):
    """Enumeration of all available GitHub tools"""

    # Repositories and branches
    FORK_REPOSITORY = "fork_repository"
    CREATE_REPOSITORY = "create_repository"
    CREATE_BRANCH = "create_branch"
    LIST_COMMITS = "list_commits"

    # Files
    GET_FILE_CONTENTS = "get_file_contents"
    CREATE_OR_UPDATE_FILE = "create_or_update_file"
    PUSH_FILES = "push_files"

    # Issues and pull requests
    LIST_ISSUES = "list_issues"
    GET_ISSUE = "get_issue"
    CREATE_ISSUE = "create_issue"
    UPDATE_ISSUE = "update_issue"
    ADD_ISSUE_COMMENT = "add_issue_comment"
    CREATE_PULL_REQUEST = "create_pull_request"

    # Gists
    CREATE_GIST = "create_gist"
    SEARCH_GISTS = "search_gists"

    # Search
    SEARCH_REPOSITORIES = "search_repositories"
    SEARCH_CODE = "search_code"
    SEARCH_ISSUES = "search_issues"
    SEARCH_USERS = "search_users"


class ToolCategory(str, Enum):
    """Tool categories for organization"""

    REPOSITORY = "repository"
    FILES = "files"
    ISSUES = "issues"
    GISTS = "gists"
    SEARCH = "search"


@dataclass
class ToolDefinition:
    """Complete tool definition with metadata"""

    name: GitHubTools
    category: ToolCategory
    description: str
    schema: Type[BaseModel]


_DEFAULT_TOOLS = [
    ToolDefinition(
        GitHubTools.FORK_REPOSITORY,
        ToolCategory.REPOSITORY,
        "Fork a GitHub repository to your account or specified organization",
        ForkRepository,
    ),
    ToolDefinition(
        GitHubTools.CREATE_REPOSITORY,
        ToolCategory.REPOSITORY,
        "Create a new GitHub repository in your account",
        CreateRepository,
    ),
    ToolDefinition(
        GitHubTools.CREATE_BRANCH,
        ToolCategory.REPOSITORY,
        "Create a new branch in a GitHub repository",
        CreateBranch,
    ),
    ToolDefinition(
        GitHubTools.LIST_COMMITS,
        ToolCategory.REPOSITORY,
        "Get list of commits of a branch in a GitHub repository",
        ListCommits,
    ),
    ToolDefinition(
        GitHubTools.GET_FILE_CONTENTS,
        ToolCategory.FILES,
        "Get the contents of a file or directory from a GitHub repository",
        GetFileContents,
    ),
    ToolDefinition(
        GitHubTools.CREATE_OR_UPDATE_FILE,
        ToolCategory.FILES,
        "Create or update a single file in a GitHub repository",
        CreateOrUpdateFile,
    ),
    ToolDefinition(
        GitHubTools.PUSH_FILES,
        ToolCategory.FILES,
        "Push multiple files to a GitHub repository in a single commit",
        PushFiles,
    ),
    ToolDefinition(
        GitHubTools.LIST_ISSUES,
        ToolCategory.ISSUES,
        "List issues in a GitHub repository with filtering options",
        ListIssues,
    ),
    ToolDefinition(
        GitHubTools.GET_ISSUE,
        ToolCategory.ISSUES,
        "Get details of a specific issue in a GitHub repository",
        GetIssue,
    ),
    ToolDefinition(
        GitHubTools.CREATE_ISSUE,
        ToolCategory.ISSUES,
        "Create a new issue in a GitHub repository",
        CreateIssue,
    ),
    ToolDefinition(
        GitHubTools.UPDATE_ISSUE,
        ToolCategory.ISSUES,
        "Update an existing issue in a GitHub repository",
        UpdateIssue,
    ),
    ToolDefinition(
        GitHubTools.ADD_ISSUE_COMMENT,
        ToolCategory.ISSUES,
        "Add a comment to an existing issue",
        AddIssueComment,
    ),
    ToolDefinition(
        GitHubTools.CREATE_PULL_REQUEST,
        ToolCategory.ISSUES,
        "Create a new pull request in a GitHub repository",
        CreatePullRequest,
    ),
    ToolDefinition(
        GitHubTools.CREATE_GIST,
        ToolCategory.GISTS,
        "Create a new GitHub gist",
        CreateGist,
    ),
    ToolDefinition(
        GitHubTools.SEARCH_GISTS,
        ToolCategory.GISTS,
        "Search your gists by keywords and 'language:' filters",
        SearchGists,
    ),
    ToolDefinition(
        GitHubTools.SEARCH_REPOSITORIES,
        ToolCategory.SEARCH,
        "Search for GitHub repositories",
        SearchRepositories,
    ),
    ToolDefinition(
        GitHubTools.SEARCH_CODE,
        ToolCategory.SEARCH,
        "Search for code across GitHub repositories",
        SearchCode,
    ),
    ToolDefinition(
        GitHubTools.SEARCH_ISSUES,
        ToolCategory.SEARCH,
        "Search for issues and pull requests across GitHub repositories",
        SearchIssues,
    ),
    ToolDefinition(
        GitHubTools.SEARCH_USERS,
        ToolCategory.SEARCH,
        "Search for users on GitHub",
        SearchUsers,
    ),
]


class ToolRegistry:
    """Central registry for all MCP GitHub Server tools"""

    def __init__(self):
        self.tools: Dict[str, ToolDefinition] = {}
        self._initialized = False

    def register(self, tool_def: ToolDefinition):
        """Register a tool in the registry"""
        self.tools[tool_def.name.value] = tool_def
        logger.debug(f"Registered tool: {tool_def.name.value} ({tool_def.category.value})")

    def get_tool(self, name: str) -> Optional[ToolDefinition]:
        """Get tool definition by name"""
        return self.tools.get(name)

    def list_tools(self) -> List[Tool]:
        """Get all tools as MCP Tool objects"""
        return [
            Tool(
                name=tool_def.name.value,
                description=tool_def.description,
                inputSchema=tool_def.schema.model_json_schema(),
            )
            for tool_def in self.tools.values()
        ]

    def get_tools_by_category(self, category: ToolCategory) -> List[ToolDefinition]:
        """Get all tools in a specific category"""
        return [
            tool_def for tool_def in self.tools.values() if tool_def.category == category
        ]

    def initialize_default_tools(self):
        """Initialize registry with every GitHub tool"""
        if self._initialized:
            return

        for tool in _DEFAULT_TOOLS:
            self.register(tool)

        self._initialized = True
        logger.info(f"Initialized tool registry with {len(self.tools)} tools")


def to_jsonable(result: Any) -> Any:
    """Turn an operation result into plain JSON data"""
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json")
    if isinstance(result, list):
        return [to_jsonable(item) for item in result]
    return result


class GitHubToolRouter:
    """Router for dispatching tool calls to GitHub operations"""

    def __init__(self, registry: ToolRegistry, client: GitHubClient):
        self.registry = registry
        self.client = client

    def parse_arguments(self, tool_def: ToolDefinition, arguments: Optional[Dict[str, Any]]) -> BaseModel:
        try:
            return tool_def.schema.model_validate(arguments or {})
        except ValidationError as e:
            raise InvalidInputError(f"Invalid arguments for {tool_def.name.value}: {e}") from e

    async def dispatch(self, tool: GitHubTools, args: Any) -> Any:
        """Run the operation behind ``tool`` with already validated arguments"""
        client = self.client

        match tool:
            case GitHubTools.FORK_REPOSITORY:
                return await api.fork_repository(client, args.owner, args.repo, args.organization)
            case GitHubTools.CREATE_REPOSITORY:
                return await api.create_repository(
                    client, args.name, args.description, args.private, args.auto_init
                )
            case GitHubTools.CREATE_BRANCH:
                return await refs.create_branch(
                    client, args.owner, args.repo, args.branch, args.from_branch
                )
            case GitHubTools.LIST_COMMITS:
                return await api.list_commits(
                    client, args.owner, args.repo, args.sha, args.page, args.per_page
                )
            case GitHubTools.GET_FILE_CONTENTS:
                return await contents.get_file_contents(
                    client, args.owner, args.repo, args.path, args.branch
                )
            case GitHubTools.CREATE_OR_UPDATE_FILE:
                return await contents.create_or_update_file(
                    client,
                    args.owner,
                    args.repo,
                    args.path,
                    args.content,
                    args.message,
                    args.branch,
                    args.sha,
                )
            case GitHubTools.PUSH_FILES:
                reference = await publish.push_files(
                    client, args.owner, args.repo, args.branch, args.files, args.message
                )
                return {"success": True, "ref": reference.ref, "sha": reference.sha}
            case GitHubTools.LIST_ISSUES:
                return await api.list_issues(
                    client,
                    args.owner,
                    args.repo,
                    state=args.state,
                    labels=args.labels,
                    sort=args.sort,
                    direction=args.direction,
                    since=args.since,
                    page=args.page,
                    per_page=args.per_page,
                )
            case GitHubTools.GET_ISSUE:
                return await api.get_issue(client, args.owner, args.repo, args.issue_number)
            case GitHubTools.CREATE_ISSUE:
                return await api.create_issue(
                    client,
                    args.owner,
                    args.repo,
                    args.title,
                    body=args.body,
                    assignees=args.assignees,
                    milestone=args.milestone,
                    labels=args.labels,
                )
            case GitHubTools.UPDATE_ISSUE:
                return await api.update_issue(
                    client,
                    args.owner,
                    args.repo,
                    args.issue_number,
                    title=args.title,
                    body=args.body,
                    state=args.state,
                    labels=args.labels,
                    assignees=args.assignees,
                    milestone=args.milestone,
                )
            case GitHubTools.ADD_ISSUE_COMMENT:
                return await api.add_issue_comment(
                    client, args.owner, args.repo, args.issue_number, args.body
                )
            case GitHubTools.CREATE_PULL_REQUEST:
                return await api.create_pull_request(
                    client,
                    args.owner,
                    args.repo,
                    args.title,
                    args.head,
                    args.base,
                    body=args.body,
                    draft=args.draft,
                    maintainer_can_modify=args.maintainer_can_modify,
                )
            case GitHubTools.CREATE_GIST:
                return await api.create_gist(client, args.files, args.description, args.public)
            case GitHubTools.SEARCH_GISTS:
                return await api.search_gists(
                    client, args.q, args.sort, args.order, args.page, args.per_page
                )
            case GitHubTools.SEARCH_REPOSITORIES:
                return await api.search_repositories(client, args.query, args.page, args.per_page)
            case GitHubTools.SEARCH_CODE:
                return await api.search_code(
                    client, args.q, args.order, args.page, args.per_page
                )
            case GitHubTools.SEARCH_ISSUES:
                return await api.search_issues(
                    client, args.q, args.sort, args.order, args.page, args.per_page
                )
            case GitHubTools.SEARCH_USERS:
                return await api.search_users(
                    client, args.q, args.sort, args.order, args.page, args.per_page
                )
            case _:
                raise InvalidInputError(f"No dispatch for tool: {tool}")

    async def route_tool_call(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
        """Route a tool call to its operation and serialize the result

        Raises:
            InvalidInputError: Unknown tool or invalid arguments
            GitHubError: The operation failed
        """
        tool_def = self.registry.get_tool(name)
        if not tool_def:
            raise InvalidInputError(f"Unknown tool: {name}")

        args = self.parse_arguments(tool_def, arguments)
        result = await self.dispatch(tool_def.name, args)
        text = json.dumps(to_jsonable(result), indent=2, ensure_ascii=False)
        return [TextContent(type="text", text=text)]
