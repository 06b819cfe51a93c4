"""Pytest configuration: Pulumi mocks shared by every program under test.

The mocks must be installed before any `cloud_stacks` program module is
imported, since those modules declare their resources at import time.
"""

import base64

import pulumi

ACCOUNT = "123456789012"
REGION = "eu-west-1"

KUBECONFIG = """apiVersion: v1
kind: Config
clusters:
- name: my-aks
  cluster:
    server: https://my-aks.hcp.westus2.azmk8s.io:443
"""

AMI_ID = "ami-0eb1f3cdeeb8eed2a"
IMAGE_URI = f"{ACCOUNT}.dkr.ecr.{REGION}.amazonaws.com/repo:latest"
SSH_PUBLIC_KEY = "ssh-rsa AAAAB3NzaC1yc2EAAAADAQABAAACAQ test"
CLIENT_ID = "00000000-0000-0000-0000-00000000c1d0"

# Pulumi wire encoding of a secret value
_SIG_KEY = "4dabf18193072939515e22adb298388d"
_SECRET_SIG = "1b47061264138c4ac30d75fd1eb44270"

# inputs as the engine received them, keyed by resource name
RECORDED_INPUTS = {}


def _reveal(value):
    if isinstance(value, dict) and value.get(_SIG_KEY) == _SECRET_SIG:
        return _reveal(value["value"])
    if isinstance(value, dict):
        return {k: _reveal(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_reveal(v) for v in value]
    return value


def _extra_outputs(args):
    """Provider-computed outputs the programs read, keyed by resource type token."""
    name = args.name
    return {
        "aws:lb/loadBalancer:LoadBalancer": {"dnsName": f"{name}-1234567890.{REGION}.elb.amazonaws.com"},
        "aws:ec2/instance:Instance": {
            "publicIp": "203.0.113.12",
            "publicDns": "ec2-203-0-113-12.compute-1.amazonaws.com",
        },
        "awsx:ecr:Repository": {"url": f"{ACCOUNT}.dkr.ecr.{REGION}.amazonaws.com/{name}"},
        "awsx:ecr:Image": {"imageUri": IMAGE_URI},
        "random:index/randomPassword:RandomPassword": {"result": "s3cr3t-P@ssw0rd-1234"},
        "tls:index/privateKey:PrivateKey": {"publicKeyOpenssh": SSH_PUBLIC_KEY},
        "azuread:index/application:Application": {"clientId": CLIENT_ID},
        "azuread:index/servicePrincipalPassword:ServicePrincipalPassword": {"value": "sp-secret"},
        "azure-native:dbformysql:Server": {"fullyQualifiedDomainName": f"{name}.mysql.database.azure.com"},
    }.get(args.typ, {})


class CloudMocks(pulumi.runtime.Mocks):
    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        RECORDED_INPUTS[args.name] = _reveal(dict(args.inputs))
        outputs = {"name": args.name, **args.inputs}
        if args.typ.startswith("aws:"):
            outputs.setdefault("arn", f"arn:aws:mock:{REGION}:{ACCOUNT}:{args.name}")
        outputs.update(_extra_outputs(args))
        return [f"{args.name}_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        if args.token == "aws:ec2/getAmi:getAmi":
            return {"architecture": "x86_64", "id": AMI_ID}
        if args.token == "azure-native:storage:listStorageAccountKeys":
            return {"keys": [
                {"keyName": "key1", "permissions": "Full", "value": "key-one"},
                {"keyName": "key2", "permissions": "Full", "value": "key-two"},
            ]}
        if args.token == "azure-native:containerservice:listManagedClusterUserCredentials":
            encoded = base64.b64encode(KUBECONFIG.encode("utf-8")).decode("ascii")
            return {"kubeconfigs": [{"name": "clusterUser", "value": encoded}]}
        return {}


pulumi.runtime.set_mocks(CloudMocks(), project="cloud-stacks", stack="test", preview=False)
