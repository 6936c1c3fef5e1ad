#
# Copyright (C) 2011 - 2017 Satoru SATOH <ssato at redhat.com>
# License: GPLv3+
#
