"""
Web Server
==========
One Ubuntu EC2 instance behind an HTTP-only security group, wrapped in the
`cloud_stacks.webserver.infra.Infrastructure` component.
"""

import pulumi

from cloud_stacks.webserver.program import infra

# -- Outputs -------------------------------------------------------------------

pulumi.export("group",          infra.group.id)
pulumi.export("server",         infra.server.id)
pulumi.export("publicIp",       infra.server.public_ip)
pulumi.export("publicHostName", infra.server.public_dns)
