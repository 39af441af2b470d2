#!/usr/bin/env python3
"""
Basic Docker Hub SDK usage example.

Creates a private repository, flips it public, grants a group access and
cleans up. Requires DOCKER_USERNAME, DOCKER_PASSWORD and an organization
name as the first argument.

Run with: python examples/basic_usage.py myorg
"""

import logging
import sys
import uuid

from dockerhub import CallContext, DockerHubClient, DockerHubError, NotFoundError, configure_logging

configure_logging(level=logging.INFO)

org = sys.argv[1]
name = f"sdk-example-{uuid.uuid4().hex[:8]}"
full_name = f"{org}/{name}"

with DockerHubClient.from_env() as client:
    print(f"1. Creating private repository {full_name}...")
    repo = client.repositories.create(org, name, description="SDK example", private=True)
    print(f"   Created: {repo}")

    print("2. Making it public...")
    client.repositories.update(full_name, private=False)
    print(f"   private={client.repositories.get(full_name).private}")

    print("3. Granting the owners group write access...")
    try:
        owners = client.groups.get(org, "owners")
        association = client.repository_groups.create(full_name, owners.id, owners.name, "write")
        print(f"   {association}")
    except NotFoundError as e:
        print(f"   No owners group: {e}")

    print("4. Reading with a 10 second deadline...")
    ctx = CallContext.with_timeout(10)
    try:
        print(f"   {client.repositories.get(full_name, ctx=ctx)}")
    except DockerHubError as e:
        print(f"   Failed: {e}")

    print("5. Deleting the repository...")
    client.repositories.delete(full_name)

print("\nDone")
