#!/usr/bin/env python3

import aws_cdk as cdk

from hotel_booking_stack import HotelBookingStack

app = cdk.App()
HotelBookingStack(
    app,
    "HotelBookingStack",
)

app.synth()
