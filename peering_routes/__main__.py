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


import argparse
import sys

from botocore.exceptions import BotoCoreError, ClientError

from . import profile, propagator
from .core import MainRouteTableNotFound, PeeringRoute


VPC_ID = "vpc-x"
REGION = "us-east-1"
DEST_CIDR = "x.x.x.x/16"
PEERING_ID = "pcx-x"
NAME_FILTER = "*Private*"


def main(argv=None):
    arg_parser = argparse.ArgumentParser(description="Adds a VPC peering route to the route tables used by matching subnets")
    arg_parser.add_argument("--vpc",
                            metavar="VPC_ID",
                            dest='vpc_id',
                            default=VPC_ID,
                            help="""The VPC whose route tables are updated.
                                    """)
    arg_parser.add_argument("--region",
                            metavar="REGION",
                            dest='region',
                            default=REGION,
                            help=f"""The AWS region of the VPC. If omitted, defaults to {REGION}
                                    """)
    arg_parser.add_argument("--destination",
                            metavar="CIDR",
                            dest='destination',
                            default=DEST_CIDR,
                            help="""The destination CIDR block of the route, normally the peer VPC's range.
                                    """)
    arg_parser.add_argument("--peering",
                            metavar="PEERING_ID",
                            dest='peering_id',
                            default=PEERING_ID,
                            help="""The VPC peering connection that the route targets.
                                    """)
    arg_parser.add_argument("--subnet-filter",
                            metavar="PATTERN",
                            dest='name_filter',
                            default=NAME_FILTER,
                            help=f"""Glob matched against subnet Name tags. If omitted, defaults to {NAME_FILTER}
                                    """)
    arg_parser.add_argument("--profile",
                            metavar="PROFILE_NAME",
                            dest='profile',
                            help="""The AWS named profile to use. If omitted, uses the default credential
                                    chain (including AWS_PROFILE).
                                    """)
    arg_parser.add_argument("--strict",
                            action='store_true',
                            help="""Exit with a non-zero status if the route could not be added to any table.
                                    """)
    args = arg_parser.parse_args(argv)

    route = PeeringRoute(args.destination, args.peering_id)
    try:
        ec2_client = profile.session(args.profile, args.region).client('ec2')
        results = propagator.run(ec2_client, args.vpc_id, route, args.name_filter, args.region)
    except MainRouteTableNotFound as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 1
    except (ClientError, BotoCoreError) as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 2

    if args.strict and propagator.failures(results):
        return 3
    return 0


if __name__ == "__main__":
    sys.exit(main())
