# generators/__init__.py
# -*- coding: utf-8 -*-
from generators import mongoose, prisma, typescript, zod

__all__ = ["typescript", "zod", "prisma", "mongoose"]
