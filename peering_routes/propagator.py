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


""" The route propagation procedure: find the route tables used by the matching
    subnets of a VPC, and add the peering route to each of them.
    """

from .core import FAILED
from .aws import routes, vpc


def run(ec2_client, vpc_id, route, name_filter, region=None):
    """ Runs each step in turn, printing progress. Returns the per-table results,
        which is empty when no subnets match the filter.

        Raises MainRouteTableNotFound before any route is created if the VPC
        has no main route table or it cannot be looked up. AWS errors from the
        subnet and association lookups propagate.
        """
    print("--- Starting Route Addition Script ---")
    print(f"VPC:         {vpc_id}")
    if region:
        print(f"Region:      {region}")
    print(f"Destination: {route.destination_cidr}")
    print(f"Peering ID:  {route.peering_connection_id}")
    print(f"Subnet Name: {name_filter}")
    print("--------------------------------------")

    print(f"1. Finding Main Route Table ID for {vpc_id}...")
    main_route_table_id = vpc.resolve_main_route_table(ec2_client, vpc_id)
    print(f"   Found Main Route Table: {main_route_table_id}")

    print(f"2. Finding subnets with name filter '{name_filter}'...")
    subnet_ids = vpc.resolve_matching_subnets(ec2_client, vpc_id, name_filter)
    if not subnet_ids:
        print(f"   No subnets found with name filter '{name_filter}'. Exiting.")
        return []
    print(f"   Found {len(subnet_ids)} matching subnets.")

    print("3. Fetching explicit route table associations...")
    associations = vpc.resolve_explicit_associations(ec2_client, vpc_id)

    print("4. Determining target route tables...")
    target_ids = vpc.Vpc(vpc_id, main_route_table_id, subnet_ids, associations).target_route_tables()
    print(f"   Found {len(target_ids)} unique route tables to update.")

    print("5. Creating routes...")
    results = routes.propagate(ec2_client, target_ids, route)

    print("--------------------------------------")
    print("Script completed.")
    return results


def failures(results):
    return [r for r in results if r.status == FAILED]
