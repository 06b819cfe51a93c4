"""Azure AD application + service principal for the cluster, and the node SSH key."""

import pulumi_azuread as azuread
import pulumi_tls as tls

from cloud_stacks.aks import SETTINGS

ad_app = azuread.Application(
    "aks",
    display_name="aks",
)

ad_sp = azuread.ServicePrincipal(
    "aksSp",
    client_id=ad_app.client_id,
)

# the secret value is generated by Azure AD and only readable from state
ad_sp_password = azuread.ServicePrincipalPassword(
    "aksSpPassword",
    service_principal_id=ad_sp.id,
    end_date=SETTINGS.sp_password_end_date,
)

ssh_key = tls.PrivateKey(
    "ssh-key",
    algorithm="RSA",
    rsa_bits=4096,
)
