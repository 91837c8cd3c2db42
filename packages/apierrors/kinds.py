"""Closed registry of error kinds exposed to API consumers.

Every kind pairs a stable numeric id with the HTTP status applied to the
transport response. Ids may be persisted or logged by other systems, so the
registry is append-only: never reuse or renumber an id, only add new ones at
the end. Gaps in the numbering are retired ids.
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True, slots=True)
class ErrorKind:
    """One catalog entry: numeric id, HTTP status and constant name."""

    id: int
    status: int
    name: str = ""


_REGISTRY: dict[int, ErrorKind] = {}


def _kind(kind_id: int, status: HTTPStatus, name: str) -> ErrorKind:
    """Create and register one kind, rejecting reused ids."""
    if kind_id in _REGISTRY:
        raise ValueError(
            f"error kind id {kind_id} already registered as {_REGISTRY[kind_id].name}"
        )
    kind = ErrorKind(id=kind_id, status=int(status), name=name)
    _REGISTRY[kind_id] = kind
    return kind


UNKNOWN_ERROR = _kind(1, HTTPStatus.INTERNAL_SERVER_ERROR, "UNKNOWN_ERROR")
ACTION_ALREADY_UPDATED = _kind(2, HTTPStatus.BAD_REQUEST, "ACTION_ALREADY_UPDATED")
NO_ACTION = _kind(3, HTTPStatus.NOT_FOUND, "NO_ACTION")
ACTION_LOOP = _kind(4, HTTPStatus.BAD_REQUEST, "ACTION_LOOP")
INVALID_ID = _kind(5, HTTPStatus.BAD_REQUEST, "INVALID_ID")
INVALID_PROJECT = _kind(6, HTTPStatus.BAD_REQUEST, "INVALID_PROJECT")
INVALID_PROJECT_KEY = _kind(7, HTTPStatus.BAD_REQUEST, "INVALID_PROJECT_KEY")
PROJECT_HAS_PIPELINE = _kind(8, HTTPStatus.FORBIDDEN, "PROJECT_HAS_PIPELINE")
PROJECT_HAS_APPLICATION = _kind(9, HTTPStatus.FORBIDDEN, "PROJECT_HAS_APPLICATION")
UNAUTHORIZED = _kind(10, HTTPStatus.UNAUTHORIZED, "UNAUTHORIZED")
FORBIDDEN = _kind(11, HTTPStatus.FORBIDDEN, "FORBIDDEN")
PIPELINE_NOT_FOUND = _kind(12, HTTPStatus.BAD_REQUEST, "PIPELINE_NOT_FOUND")
PIPELINE_NOT_ATTACHED = _kind(13, HTTPStatus.BAD_REQUEST, "PIPELINE_NOT_ATTACHED")
NO_ENVIRONMENT_PROVIDED = _kind(14, HTTPStatus.BAD_REQUEST, "NO_ENVIRONMENT_PROVIDED")
ENVIRONMENT_PROVIDED = _kind(15, HTTPStatus.BAD_REQUEST, "ENVIRONMENT_PROVIDED")
UNKNOWN_ENV = _kind(16, HTTPStatus.BAD_REQUEST, "UNKNOWN_ENV")
ENVIRONMENT_EXIST = _kind(17, HTTPStatus.FORBIDDEN, "ENVIRONMENT_EXIST")
NO_PIPELINE_BUILD = _kind(18, HTTPStatus.NOT_FOUND, "NO_PIPELINE_BUILD")
INVALID_USERNAME = _kind(21, HTTPStatus.BAD_REQUEST, "INVALID_USERNAME")
INVALID_EMAIL = _kind(22, HTTPStatus.BAD_REQUEST, "INVALID_EMAIL")
GROUP_PRESENT = _kind(23, HTTPStatus.BAD_REQUEST, "GROUP_PRESENT")
INVALID_NAME = _kind(24, HTTPStatus.BAD_REQUEST, "INVALID_NAME")
INVALID_USER = _kind(25, HTTPStatus.BAD_REQUEST, "INVALID_USER")
BUILD_ARCHIVED = _kind(26, HTTPStatus.BAD_REQUEST, "BUILD_ARCHIVED")
NO_ENVIRONMENT = _kind(27, HTTPStatus.NOT_FOUND, "NO_ENVIRONMENT")
MODEL_NAME_EXIST = _kind(28, HTTPStatus.FORBIDDEN, "MODEL_NAME_EXIST")
NO_PROJECT = _kind(30, HTTPStatus.NOT_FOUND, "NO_PROJECT")
VARIABLE_EXISTS = _kind(31, HTTPStatus.FORBIDDEN, "VARIABLE_EXISTS")
INVALID_GROUP_PATTERN = _kind(32, HTTPStatus.BAD_REQUEST, "INVALID_GROUP_PATTERN")
GROUP_EXISTS = _kind(33, HTTPStatus.FORBIDDEN, "GROUP_EXISTS")
NOT_ENOUGH_ADMIN = _kind(34, HTTPStatus.BAD_REQUEST, "NOT_ENOUGH_ADMIN")
INVALID_PROJECT_NAME = _kind(35, HTTPStatus.BAD_REQUEST, "INVALID_PROJECT_NAME")
INVALID_APPLICATION_PATTERN = _kind(
    36, HTTPStatus.BAD_REQUEST, "INVALID_APPLICATION_PATTERN"
)
INVALID_PIPELINE_PATTERN = _kind(37, HTTPStatus.BAD_REQUEST, "INVALID_PIPELINE_PATTERN")
NOT_FOUND = _kind(38, HTTPStatus.NOT_FOUND, "NOT_FOUND")
NO_HOOK = _kind(40, HTTPStatus.NOT_FOUND, "NO_HOOK")
NO_ATTACHED_PIPELINE = _kind(41, HTTPStatus.NOT_FOUND, "NO_ATTACHED_PIPELINE")
NO_REPOS_MANAGER = _kind(42, HTTPStatus.NOT_FOUND, "NO_REPOS_MANAGER")
NO_REPOS_MANAGER_AUTH = _kind(43, HTTPStatus.UNAUTHORIZED, "NO_REPOS_MANAGER_AUTH")
NO_REPOS_MANAGER_CLIENT_AUTH = _kind(
    44, HTTPStatus.FORBIDDEN, "NO_REPOS_MANAGER_CLIENT_AUTH"
)
REPO_NOT_FOUND = _kind(45, HTTPStatus.NOT_FOUND, "REPO_NOT_FOUND")
SECRET_STORE_UNREACHABLE = _kind(
    46, HTTPStatus.METHOD_NOT_ALLOWED, "SECRET_STORE_UNREACHABLE"
)
SECRET_KEY_FETCH_FAILED = _kind(
    47, HTTPStatus.METHOD_NOT_ALLOWED, "SECRET_KEY_FETCH_FAILED"
)
INVALID_GO_PATH = _kind(48, HTTPStatus.BAD_REQUEST, "INVALID_GO_PATH")
COMMITS_FETCH_FAILED = _kind(49, HTTPStatus.NOT_FOUND, "COMMITS_FETCH_FAILED")
INVALID_SECRET_FORMAT = _kind(
    50, HTTPStatus.INTERNAL_SERVER_ERROR, "INVALID_SECRET_FORMAT"
)
NO_PREVIOUS_SUCCESS = _kind(52, HTTPStatus.NOT_FOUND, "NO_PREVIOUS_SUCCESS")
NO_PERM_EXECUTION = _kind(53, HTTPStatus.FORBIDDEN, "NO_PERM_EXECUTION")
SESSION_NOT_FOUND = _kind(54, HTTPStatus.UNAUTHORIZED, "SESSION_NOT_FOUND")
INVALID_SECRET_VALUE = _kind(55, HTTPStatus.BAD_REQUEST, "INVALID_SECRET_VALUE")
PIPELINE_HAS_APPLICATION = _kind(56, HTTPStatus.BAD_REQUEST, "PIPELINE_HAS_APPLICATION")
NO_DIRECT_SECRET_USE = _kind(57, HTTPStatus.FORBIDDEN, "NO_DIRECT_SECRET_USE")
NO_BRANCH = _kind(58, HTTPStatus.NOT_FOUND, "NO_BRANCH")
LDAP_CONN = _kind(59, HTTPStatus.INTERNAL_SERVER_ERROR, "LDAP_CONN")
SERVICE_UNAVAILABLE = _kind(60, HTTPStatus.SERVICE_UNAVAILABLE, "SERVICE_UNAVAILABLE")
PARSE_USER_NOTIFICATION = _kind(61, HTTPStatus.BAD_REQUEST, "PARSE_USER_NOTIFICATION")
NOT_SUPPORTED_USER_NOTIFICATION = _kind(
    62, HTTPStatus.BAD_REQUEST, "NOT_SUPPORTED_USER_NOTIFICATION"
)
GROUP_NEED_ADMIN = _kind(63, HTTPStatus.BAD_REQUEST, "GROUP_NEED_ADMIN")
GROUP_NEED_WRITE = _kind(64, HTTPStatus.BAD_REQUEST, "GROUP_NEED_WRITE")
NO_VARIABLE = _kind(65, HTTPStatus.NOT_FOUND, "NO_VARIABLE")
PLUGIN_INVALID = _kind(66, HTTPStatus.BAD_REQUEST, "PLUGIN_INVALID")
APPLICATION_EXIST = _kind(69, HTTPStatus.FORBIDDEN, "APPLICATION_EXIST")
BRANCH_NAME_NOT_PROVIDED = _kind(70, HTTPStatus.BAD_REQUEST, "BRANCH_NAME_NOT_PROVIDED")
INFINITE_TRIGGER_LOOP = _kind(71, HTTPStatus.BAD_REQUEST, "INFINITE_TRIGGER_LOOP")
INVALID_RESET_USER = _kind(72, HTTPStatus.BAD_REQUEST, "INVALID_RESET_USER")
USER_CONFLICT = _kind(73, HTTPStatus.BAD_REQUEST, "USER_CONFLICT")
WRONG_REQUEST = _kind(74, HTTPStatus.BAD_REQUEST, "WRONG_REQUEST")
ALREADY_EXIST = _kind(75, HTTPStatus.FORBIDDEN, "ALREADY_EXIST")
INVALID_TYPE = _kind(76, HTTPStatus.BAD_REQUEST, "INVALID_TYPE")
PARENT_APPLICATION_AND_PIPELINE_MANDATORY = _kind(
    77, HTTPStatus.BAD_REQUEST, "PARENT_APPLICATION_AND_PIPELINE_MANDATORY"
)
NO_PARENT_BUILD_FOUND = _kind(78, HTTPStatus.NOT_FOUND, "NO_PARENT_BUILD_FOUND")
PARAMETER_EXISTS = _kind(79, HTTPStatus.FORBIDDEN, "PARAMETER_EXISTS")
NO_HATCHERY = _kind(80, HTTPStatus.NOT_FOUND, "NO_HATCHERY")
INVALID_WORKER_STATUS = _kind(81, HTTPStatus.NOT_FOUND, "INVALID_WORKER_STATUS")
INVALID_TOKEN = _kind(82, HTTPStatus.UNAUTHORIZED, "INVALID_TOKEN")
APP_BUILDING_PIPELINES = _kind(83, HTTPStatus.FORBIDDEN, "APP_BUILDING_PIPELINES")
INVALID_TIMEZONE = _kind(84, HTTPStatus.BAD_REQUEST, "INVALID_TIMEZONE")
ENVIRONMENT_CANNOT_BE_DELETED = _kind(
    85, HTTPStatus.FORBIDDEN, "ENVIRONMENT_CANNOT_BE_DELETED"
)
INVALID_PIPELINE = _kind(86, HTTPStatus.BAD_REQUEST, "INVALID_PIPELINE")
KEY_NOT_FOUND = _kind(87, HTTPStatus.NOT_FOUND, "KEY_NOT_FOUND")
PIPELINE_ALREADY_EXISTS = _kind(88, HTTPStatus.FORBIDDEN, "PIPELINE_ALREADY_EXISTS")
JOB_ALREADY_BOOKED = _kind(89, HTTPStatus.FORBIDDEN, "JOB_ALREADY_BOOKED")
PIPELINE_BUILD_NOT_FOUND = _kind(90, HTTPStatus.NOT_FOUND, "PIPELINE_BUILD_NOT_FOUND")
ALREADY_TAKEN = _kind(91, HTTPStatus.GONE, "ALREADY_TAKEN")
WORKFLOW_NODE_NOT_FOUND = _kind(93, HTTPStatus.NOT_FOUND, "WORKFLOW_NODE_NOT_FOUND")
WORKFLOW_INVALID_ROOT = _kind(94, HTTPStatus.BAD_REQUEST, "WORKFLOW_INVALID_ROOT")
WORKFLOW_NODE_REF = _kind(95, HTTPStatus.BAD_REQUEST, "WORKFLOW_NODE_REF")
WORKFLOW_INVALID = _kind(96, HTTPStatus.BAD_REQUEST, "WORKFLOW_INVALID")
WORKFLOW_NODE_JOIN_NOT_FOUND = _kind(
    97, HTTPStatus.NOT_FOUND, "WORKFLOW_NODE_JOIN_NOT_FOUND"
)
INVALID_JOB_REQUIREMENT = _kind(98, HTTPStatus.BAD_REQUEST, "INVALID_JOB_REQUIREMENT")
NOT_IMPLEMENTED = _kind(99, HTTPStatus.NOT_IMPLEMENTED, "NOT_IMPLEMENTED")
PARAMETER_NOT_EXISTS = _kind(100, HTTPStatus.NOT_FOUND, "PARAMETER_NOT_EXISTS")
UNKNOWN_KEY_TYPE = _kind(101, HTTPStatus.BAD_REQUEST, "UNKNOWN_KEY_TYPE")
INVALID_KEY_PATTERN = _kind(102, HTTPStatus.BAD_REQUEST, "INVALID_KEY_PATTERN")
WEBHOOK_CONFIG_DOES_NOT_MATCH = _kind(
    103, HTTPStatus.BAD_REQUEST, "WEBHOOK_CONFIG_DOES_NOT_MATCH"
)
PIPELINE_USED_BY_WORKFLOW = _kind(
    104, HTTPStatus.BAD_REQUEST, "PIPELINE_USED_BY_WORKFLOW"
)
METHOD_NOT_ALLOWED = _kind(105, HTTPStatus.METHOD_NOT_ALLOWED, "METHOD_NOT_ALLOWED")
INVALID_NODE_NAME_PATTERN = _kind(
    106, HTTPStatus.BAD_REQUEST, "INVALID_NODE_NAME_PATTERN"
)
WORKFLOW_NODE_PARENT_NOT_RUN = _kind(
    107, HTTPStatus.FORBIDDEN, "WORKFLOW_NODE_PARENT_NOT_RUN"
)
HOOK_NOT_FOUND = _kind(108, HTTPStatus.NOT_FOUND, "HOOK_NOT_FOUND")
DEFAULT_GROUP_PERMISSION = _kind(
    109, HTTPStatus.BAD_REQUEST, "DEFAULT_GROUP_PERMISSION"
)
LAST_GROUP_WITH_WRITE_ROLE = _kind(
    110, HTTPStatus.FORBIDDEN, "LAST_GROUP_WITH_WRITE_ROLE"
)
INVALID_EMAIL_DOMAIN = _kind(111, HTTPStatus.FORBIDDEN, "INVALID_EMAIL_DOMAIN")
WORKFLOW_NODE_RUN_JOB_NOT_FOUND = _kind(
    112, HTTPStatus.NOT_FOUND, "WORKFLOW_NODE_RUN_JOB_NOT_FOUND"
)
BUILTIN_KEY_NOT_FOUND = _kind(
    113, HTTPStatus.INTERNAL_SERVER_ERROR, "BUILTIN_KEY_NOT_FOUND"
)
STEP_NOT_FOUND = _kind(114, HTTPStatus.NOT_FOUND, "STEP_NOT_FOUND")
WORKER_MODEL_ALREADY_BOOKED = _kind(
    115, HTTPStatus.FORBIDDEN, "WORKER_MODEL_ALREADY_BOOKED"
)
CONDITIONS_NOT_OK = _kind(116, HTTPStatus.BAD_REQUEST, "CONDITIONS_NOT_OK")
DOWNLOAD_INVALID_OS = _kind(117, HTTPStatus.NOT_FOUND, "DOWNLOAD_INVALID_OS")
DOWNLOAD_INVALID_ARCH = _kind(118, HTTPStatus.NOT_FOUND, "DOWNLOAD_INVALID_ARCH")
DOWNLOAD_INVALID_NAME = _kind(119, HTTPStatus.NOT_FOUND, "DOWNLOAD_INVALID_NAME")
DOWNLOAD_DOES_NOT_EXIST = _kind(120, HTTPStatus.NOT_FOUND, "DOWNLOAD_DOES_NOT_EXIST")
TOKEN_NOT_FOUND = _kind(121, HTTPStatus.NOT_FOUND, "TOKEN_NOT_FOUND")
WORKFLOW_NOTIFICATION_NODE_REF = _kind(
    122, HTTPStatus.BAD_REQUEST, "WORKFLOW_NOTIFICATION_NODE_REF"
)
INVALID_JOB_REQUIREMENT_DUPLICATE_MODEL = _kind(
    123, HTTPStatus.BAD_REQUEST, "INVALID_JOB_REQUIREMENT_DUPLICATE_MODEL"
)
INVALID_JOB_REQUIREMENT_DUPLICATE_HOSTNAME = _kind(
    124, HTTPStatus.BAD_REQUEST, "INVALID_JOB_REQUIREMENT_DUPLICATE_HOSTNAME"
)
INVALID_KEY_NAME = _kind(125, HTTPStatus.BAD_REQUEST, "INVALID_KEY_NAME")
REPO_OPERATION_TIMEOUT = _kind(
    126, HTTPStatus.REQUEST_TIMEOUT, "REPO_OPERATION_TIMEOUT"
)
INVALID_GIT_BRANCH = _kind(127, HTTPStatus.BAD_REQUEST, "INVALID_GIT_BRANCH")
INVALID_FAVORITE_TYPE = _kind(128, HTTPStatus.BAD_REQUEST, "INVALID_FAVORITE_TYPE")
UNSUPPORTED_OS_ARCH_PLUGIN = _kind(
    129, HTTPStatus.NOT_FOUND, "UNSUPPORTED_OS_ARCH_PLUGIN"
)
NO_BROADCAST = _kind(130, HTTPStatus.NOT_FOUND, "NO_BROADCAST")
BROADCAST_NOT_FOUND = _kind(131, HTTPStatus.NOT_FOUND, "BROADCAST_NOT_FOUND")
INVALID_PATTERN_MODEL = _kind(132, HTTPStatus.BAD_REQUEST, "INVALID_PATTERN_MODEL")
WORKER_MODEL_NO_ADMIN = _kind(133, HTTPStatus.FORBIDDEN, "WORKER_MODEL_NO_ADMIN")
WORKER_MODEL_NO_PATTERN = _kind(134, HTTPStatus.FORBIDDEN, "WORKER_MODEL_NO_PATTERN")
JOB_NOT_BOOKED = _kind(135, HTTPStatus.BAD_REQUEST, "JOB_NOT_BOOKED")
USER_NOT_FOUND = _kind(136, HTTPStatus.NOT_FOUND, "USER_NOT_FOUND")
INVALID_NUMBER = _kind(137, HTTPStatus.BAD_REQUEST, "INVALID_NUMBER")
KEY_ALREADY_EXIST = _kind(138, HTTPStatus.FORBIDDEN, "KEY_ALREADY_EXIST")
PIPELINE_NAME_IMPORT = _kind(139, HTTPStatus.BAD_REQUEST, "PIPELINE_NAME_IMPORT")
WORKFLOW_NAME_IMPORT = _kind(140, HTTPStatus.BAD_REQUEST, "WORKFLOW_NAME_IMPORT")
ICON_BAD_FORMAT = _kind(141, HTTPStatus.BAD_REQUEST, "ICON_BAD_FORMAT")
ICON_BAD_SIZE = _kind(142, HTTPStatus.BAD_REQUEST, "ICON_BAD_SIZE")
WORKFLOW_CONDITION_BAD_OPERATOR = _kind(
    143, HTTPStatus.BAD_REQUEST, "WORKFLOW_CONDITION_BAD_OPERATOR"
)
COLOR_BAD_FORMAT = _kind(144, HTTPStatus.BAD_REQUEST, "COLOR_BAD_FORMAT")
INVALID_HOOK_CONFIGURATION = _kind(
    145, HTTPStatus.BAD_REQUEST, "INVALID_HOOK_CONFIGURATION"
)
WORKER_MODEL_DEPLOYMENT_FAILED = _kind(
    146, HTTPStatus.BAD_REQUEST, "WORKER_MODEL_DEPLOYMENT_FAILED"
)
JOB_LOCKED = _kind(147, HTTPStatus.CONFLICT, "JOB_LOCKED")
WORKFLOW_NODE_RUN_LOCKED = _kind(148, HTTPStatus.CONFLICT, "WORKFLOW_NODE_RUN_LOCKED")
INVALID_DATA = _kind(149, HTTPStatus.BAD_REQUEST, "INVALID_DATA")
INVALID_GROUP_ADMIN = _kind(150, HTTPStatus.FORBIDDEN, "INVALID_GROUP_ADMIN")
INVALID_GROUP_MEMBER = _kind(151, HTTPStatus.FORBIDDEN, "INVALID_GROUP_MEMBER")
WORKFLOW_NOT_GENERATED = _kind(152, HTTPStatus.FORBIDDEN, "WORKFLOW_NOT_GENERATED")
ALREADY_LATEST_TEMPLATE = _kind(153, HTTPStatus.FORBIDDEN, "ALREADY_LATEST_TEMPLATE")
INVALID_NODE_DEFAULT_PAYLOAD = _kind(
    154, HTTPStatus.BAD_REQUEST, "INVALID_NODE_DEFAULT_PAYLOAD"
)
INVALID_APPLICATION_REPO_STRATEGY = _kind(
    155, HTTPStatus.BAD_REQUEST, "INVALID_APPLICATION_REPO_STRATEGY"
)
WORKFLOW_NODE_ROOT_UPDATE = _kind(
    156, HTTPStatus.BAD_REQUEST, "WORKFLOW_NODE_ROOT_UPDATE"
)
WORKFLOW_ALREADY_AS_CODE = _kind(
    157, HTTPStatus.BAD_REQUEST, "WORKFLOW_ALREADY_AS_CODE"
)
NO_DB_MIGRATION_ID = _kind(158, HTTPStatus.NOT_FOUND, "NO_DB_MIGRATION_ID")
CANNOT_PARSE_TEMPLATE = _kind(159, HTTPStatus.BAD_REQUEST, "CANNOT_PARSE_TEMPLATE")
GROUP_NOT_FOUND_IN_PROJECT = _kind(
    160, HTTPStatus.BAD_REQUEST, "GROUP_NOT_FOUND_IN_PROJECT"
)
GROUP_NOT_FOUND_IN_WORKFLOW = _kind(
    161, HTTPStatus.BAD_REQUEST, "GROUP_NOT_FOUND_IN_WORKFLOW"
)
WORKFLOW_PERM_INSUFFICIENT = _kind(
    162, HTTPStatus.BAD_REQUEST, "WORKFLOW_PERM_INSUFFICIENT"
)
APPLICATION_USED_BY_WORKFLOW = _kind(
    163, HTTPStatus.BAD_REQUEST, "APPLICATION_USED_BY_WORKFLOW"
)
LOCKED = _kind(164, HTTPStatus.CONFLICT, "LOCKED")
INVALID_JOB_REQUIREMENT_WORKER_MODEL_PERMISSION = _kind(
    165, HTTPStatus.BAD_REQUEST, "INVALID_JOB_REQUIREMENT_WORKER_MODEL_PERMISSION"
)
INVALID_JOB_REQUIREMENT_WORKER_MODEL_CAPABILITIES = _kind(
    166, HTTPStatus.BAD_REQUEST, "INVALID_JOB_REQUIREMENT_WORKER_MODEL_CAPABILITIES"
)
MALFORMATTED_STEP = _kind(167, HTTPStatus.BAD_REQUEST, "MALFORMATTED_STEP")
VCS_USED_BY_APPLICATION = _kind(168, HTTPStatus.BAD_REQUEST, "VCS_USED_BY_APPLICATION")
APPLICATION_AS_CODE_OVERRIDE = _kind(
    169, HTTPStatus.FORBIDDEN, "APPLICATION_AS_CODE_OVERRIDE"
)
PIPELINE_AS_CODE_OVERRIDE = _kind(
    170, HTTPStatus.FORBIDDEN, "PIPELINE_AS_CODE_OVERRIDE"
)
ENVIRONMENT_AS_CODE_OVERRIDE = _kind(
    171, HTTPStatus.FORBIDDEN, "ENVIRONMENT_AS_CODE_OVERRIDE"
)
WORKFLOW_AS_CODE_OVERRIDE = _kind(
    172, HTTPStatus.FORBIDDEN, "WORKFLOW_AS_CODE_OVERRIDE"
)
PROJECT_SECRET_DATA_UNKNOWN = _kind(
    173, HTTPStatus.BAD_REQUEST, "PROJECT_SECRET_DATA_UNKNOWN"
)
APPLICATION_MANDATORY_ON_WORKFLOW_AS_CODE = _kind(
    174, HTTPStatus.BAD_REQUEST, "APPLICATION_MANDATORY_ON_WORKFLOW_AS_CODE"
)
INVALID_PASSWORD = _kind(175, HTTPStatus.BAD_REQUEST, "INVALID_PASSWORD")
INVALID_PAYLOAD_VARIABLE = _kind(
    176, HTTPStatus.BAD_REQUEST, "INVALID_PAYLOAD_VARIABLE"
)
REPOSITORY_USED_BY_HOOK = _kind(177, HTTPStatus.FORBIDDEN, "REPOSITORY_USED_BY_HOOK")
RESOURCE_NOT_IN_PROJECT = _kind(178, HTTPStatus.FORBIDDEN, "RESOURCE_NOT_IN_PROJECT")
ENVIRONMENT_NOT_FOUND = _kind(179, HTTPStatus.BAD_REQUEST, "ENVIRONMENT_NOT_FOUND")
INTEGRATION_NOT_FOUND = _kind(180, HTTPStatus.BAD_REQUEST, "INTEGRATION_NOT_FOUND")
BAD_BROKER_CONFIGURATION = _kind(
    181, HTTPStatus.BAD_REQUEST, "BAD_BROKER_CONFIGURATION"
)
SIGNUP_DISABLED = _kind(182, HTTPStatus.FORBIDDEN, "SIGNUP_DISABLED")
USERNAME_PRESENT = _kind(183, HTTPStatus.BAD_REQUEST, "USERNAME_PRESENT")
INVALID_JOB_REQUIREMENT_NETWORK_ACCESS = _kind(
    184, HTTPStatus.BAD_REQUEST, "INVALID_JOB_REQUIREMENT_NETWORK_ACCESS"
)
INVALID_WORKER_MODEL_NAME_PATTERN = _kind(
    185, HTTPStatus.BAD_REQUEST, "INVALID_WORKER_MODEL_NAME_PATTERN"
)
WORKFLOW_AS_CODE_RESYNC = _kind(186, HTTPStatus.FORBIDDEN, "WORKFLOW_AS_CODE_RESYNC")
WORKFLOW_NODE_NAME_DUPLICATE = _kind(
    187, HTTPStatus.BAD_REQUEST, "WORKFLOW_NODE_NAME_DUPLICATE"
)
UNSUPPORTED_MEDIA_TYPE = _kind(
    188, HTTPStatus.UNSUPPORTED_MEDIA_TYPE, "UNSUPPORTED_MEDIA_TYPE"
)
NOTHING_TO_PUSH = _kind(189, HTTPStatus.BAD_REQUEST, "NOTHING_TO_PUSH")
WORKER_ERROR_COMMAND = _kind(190, HTTPStatus.BAD_REQUEST, "WORKER_ERROR_COMMAND")

REGISTRY: Mapping[int, ErrorKind] = MappingProxyType(_REGISTRY)


def lookup(kind_id: int) -> ErrorKind | None:
    """Return the registered kind for ``kind_id`` or ``None``."""
    return REGISTRY.get(kind_id)


def all_kinds() -> tuple[ErrorKind, ...]:
    """Return every registered kind ordered by id."""
    return tuple(REGISTRY[kind_id] for kind_id in sorted(REGISTRY))
