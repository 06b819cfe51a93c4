"""Web server stack: one `Infrastructure` component configured from the stack."""

import pulumi

from cloud_stacks.config import WebserverSettings, base_tags
from cloud_stacks.webserver.infra import Infrastructure

SETTINGS = WebserverSettings.from_config(pulumi.Config())

TAGS = base_tags(pulumi.get_project(), pulumi.get_stack())

infra = Infrastructure("infra", settings=SETTINGS, tags=TAGS)
