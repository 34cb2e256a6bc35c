"""Employee directory API package.

Employee, Department and Developers records live in three separate tables and
are joined at read time. A thin Flask controller sits on top of the
service/repository layers.
"""
