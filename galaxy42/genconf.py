"""Writing the default set of node configuration files."""

from __future__ import annotations

import os

GALAXY_CONF = "galaxy.conf"
AUTHPASS_CONF = "connect_from.my.conf"
CONNECT_TO_MY_CONF = "connect_to.my.conf"
CONNECT_TO_SEED_CONF = "connect_to.seed.conf"

_GALAXY_TEMPLATE = """\
{
\t// Your private key - the private key should be at bottom of this file.

\t// Your public key - this key corresponds to the private key and ipv6 address:
\t"myself-public" : {
\t\t"publicKey": "placeholder",
\t\t"ipv6": "fd42:aaaa:bbbb:cccc:aaaa:bbbb:cccc:dddd"
\t},
\t// *** ADD(1) *** add here peers that will connect to you (and/or instead add ones to which you will connect)
\t// 1) Here you create passwords for other nodes - anyone connecting and offering these passwords on connection will be allowed.
\t// We strongly recommend passwords to be random string of at least 40 characters; Or for easier typing: 8 not-obvious words randomly from dictionary plus some numbers.
\t// 2) Then you give your friend his password plus example data as seen below

\t"authorizedPasswords" : [
\t\t"connect_from.my.conf"\t// <--- do not modify this line. Thanks to it, you can insert the new passwords in this file.
\t],

\t/* EXAMPLE DATA FOR FRIEND:
--- Give your friend this text, after filling in the fields marked with XXX and putting one of the passwords above as password ----
\t"XXX_HERE_WRITE_YOUR_OWN_IP_ADDRESS_OR_DOMAIN:9042": {
\t\t"password": "password",
\t\t"publicKey": "placeholder",
\t\t"ipv6": "fd42:aaaa:bbbb:cccc:aaaa:bbbb:cccc:dddd",
\t}
--- above is for friend ---
\t*/

\t"connectTo" : [
\t// --- below --- insert the credentials from friends
\t\t"connect_to.my.conf", // <--- do not modify this line. Thanks to it, you can insert the friend references also to file "peers.conf" as written here.
\t\t"connect_to.seed.conf" // <--- do not modify this line. It allows to use the default peers. You can remove this line or comment it out if you want.
\t// --- above --- insert the credentials from friends
\t],

\t// Private key. Your confidentiality and data integrity depend on this key, keep it SECRET!!!
\t"privateKeyType": "master-dh",
\t"privateKey": "placeholder"
}
"""

_AUTHPASS_TEMPLATE = """\
{
\t"authorizedPasswords" : [
\t\t{"password": "password", "myname":"default_public_password"}
\t\t//{"password": "password", "myname":"password_nr1"},
\t\t//{"password": "password", "myname":"password_nr2"},
\t\t//{"password": "password", "myname":"password_nr3"}
\t\t// you can add more passwords here, or change the one above, e.g. change the "myname" field
\t\t// another example: {"password": "password", "myname":"my_friend_from_the_bar"}
\t]
}
"""

_CONNECTTO_TEMPLATE = """\
{
\t"connectTo" : {
\t// --- below --- insert the credentials from friends

\t\t/**
\t\t * Testing peers:
\t\t * // Peer nr 0
\t\t *  "192.168.0.57" : {
\t\t *  \t"publicKey" : "asdasd"
\t\t *  },
\t\t * // Peer nr 1
\t\t *  "[fc72:aa65:c5c2:4a2d:54e:7947:b671:e00c]" : {
\t\t *  \t"publicKey" : "asdasd"
\t\t *  }
\t\t */

\t// --- above --- insert the credentials from friends
\t}
}
"""


def _write(filename: str, description: str, content: str) -> str:
    try:
        with open(filename, "w", encoding="utf-8", newline="\n") as conf_file:
            print(f"{description}: {filename}")
            conf_file.write(content)
    except OSError as err:
        raise ValueError(f"Fail to open file for write: {filename}") from err
    return filename


def generate_galaxy_conf(filename: str = GALAXY_CONF) -> str:
    """Write the main configuration file; return its name."""
    return _write(filename, "Generating main configuration file", _GALAXY_TEMPLATE)


def generate_authpass_conf(filename: str) -> str:
    """Write the authorized passwords file; return its name."""
    return _write(
        filename, "Generating authorized passwords configuration file", _AUTHPASS_TEMPLATE
    )


def generate_connectto_conf(filename: str) -> str:
    """Write a peer references (connect to) file; return its name."""
    return _write(
        filename,
        "Generating peer references -- connect to configuration file",
        _CONNECTTO_TEMPLATE,
    )


def genconf(directory: str = ".") -> list[str]:
    """Write the default set of configuration files into directory; return their paths."""
    return [
        generate_galaxy_conf(os.path.join(directory, GALAXY_CONF)),
        generate_authpass_conf(os.path.join(directory, AUTHPASS_CONF)),
        generate_connectto_conf(os.path.join(directory, CONNECT_TO_MY_CONF)),
        generate_connectto_conf(os.path.join(directory, CONNECT_TO_SEED_CONF)),
    ]