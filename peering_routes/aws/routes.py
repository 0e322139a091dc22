# Copyright 2023, Chariot Solutions
# 
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
# 
#     http://www.apache.org/licenses/LICENSE-2.0
# 
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


""" Code to add a peering route to route tables. Creation is idempotent: a route
    that already exists for the destination is reported as skipped.
    """

import sys

from botocore.exceptions import BotoCoreError, ClientError

from ..core import RouteResult, CREATED, SKIPPED, FAILED


ROUTE_ALREADY_EXISTS = "RouteAlreadyExists"


def create_route(ec2_client, route_table_id, route):
    """ Attempts to add the route to a single table. Never raises for AWS errors;
        the outcome is returned as a RouteResult.
        """
    try:
        ec2_client.create_route(RouteTableId=route_table_id,
                                DestinationCidrBlock=route.destination_cidr,
                                VpcPeeringConnectionId=route.peering_connection_id)
        return RouteResult(route_table_id, CREATED, None)
    except ClientError as ex:
        if ex.response.get('Error', {}).get('Code') == ROUTE_ALREADY_EXISTS:
            return RouteResult(route_table_id, SKIPPED, None)
        return RouteResult(route_table_id, FAILED, str(ex))
    except BotoCoreError as ex:
        return RouteResult(route_table_id, FAILED, str(ex))


def propagate(ec2_client, route_table_ids, route):
    """ Adds the route to every table, printing one status line per table. A
        failure on one table does not stop the others.
        """
    results = []
    for route_table_id in sorted(route_table_ids):
        print(f"   Updating {route_table_id}... ", end="", flush=True)
        result = create_route(ec2_client, route_table_id, route)
        if result.status == CREATED:
            print("SUCCESS (Route created)")
        elif result.status == SKIPPED:
            print("SKIPPED (Route already exists)")
        else:
            print("FAILED")
            print(f"      Error: {result.message}", file=sys.stderr)
        results.append(result)
    return results
