"""Parsing and checking of resource documentation page contents."""