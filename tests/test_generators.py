"""
Tests for the four schema generators.

Array fields render with their tracked item kind (`tags: string[]`), not the
generic `any[]` marker; only an empty array falls back to the generic form.
"""
import pytest

from field_types import FieldType
from generators import mongoose, prisma, typescript, zod
from inference import infer_from_json_string, infer_from_samples


class TestTypeScriptGenerator:
    def test_end_to_end(self, sample_root):
        out = typescript.generate(sample_root, "Root")
        assert out == (
            "interface Root {\n"
            "  name: string;\n"
            "  age: number;\n"
            "  tags: string[];\n"
            "  address: interface Address {\n"
            "    city: string;\n"
            "  };\n"
            "}"
        )

    def test_default_root_name(self, sample_root):
        assert typescript.generate(sample_root).startswith("interface Root {")

    def test_empty_object(self, empty_root):
        assert typescript.generate(empty_root) == "interface Root {\n  // Empty object\n}"
        assert typescript.generate(empty_root, use_interfaces=False) == "type Root = {};"

    def test_scalar_root(self):
        out = typescript.generate(infer_from_json_string('"just text"'), "Root")
        assert out == "interface Root {\n  // Empty object\n}"

    def test_three_levels_of_nesting(self, deep_root):
        out = typescript.generate(deep_root)
        assert "interface Root {" in out
        assert "  a: interface A {" in out
        assert "    b: interface B {" in out
        assert "      c: number;" in out

    def test_type_alias_mode(self, deep_root):
        out = typescript.generate(deep_root, use_interfaces=False)
        assert out.startswith("type Root = {\n  a: type A = {\n")
        assert out.endswith("\n};")

    def test_empty_and_null_arrays(self):
        root = infer_from_json_string('{"e": [], "n": [null], "m": [[1], [2]]}')
        out = typescript.generate(root)
        assert "  e: any[];" in out
        assert "  n: null[];" in out
        assert "  m: any[][];" in out

    def test_array_of_objects(self):
        out = typescript.generate(infer_from_json_string('{"users": [{"id": 1}, {"x": 2}]}'))
        assert "  users: interface Users {\n    id: number;\n  }[];" in out
        assert "x:" not in out

    def test_null_field_has_no_duplicate_union(self):
        out = typescript.generate(infer_from_json_string('{"x": null}'))
        assert "  x: null;" in out

    def test_optional_and_nullable(self):
        root = infer_from_samples([{"a": "x", "b": 1}, {"a": None}])
        out = typescript.generate(root)
        assert "  a: string | null;" in out
        assert "  b?: number;" in out

    def test_non_identifier_keys_are_quoted(self):
        out = typescript.generate(infer_from_json_string('{"first-name": "x"}'))
        assert '  "first-name": string;' in out

    def test_unknown_kind_falls_back_to_any(self):
        root = FieldType("root", "object", children=(FieldType("w", "weird"),))
        assert "  w: any;" in typescript.generate(root)


class TestZodGenerator:
    def test_end_to_end(self, sample_root):
        assert zod.generate(sample_root) == (
            "const RootSchema = z.object({\n"
            "  name: z.string(),\n"
            "  age: z.number(),\n"
            "  tags: z.array(z.string()),\n"
            "  address: z.object({\n"
            "    city: z.string(),\n"
            "  }),\n"
            "});"
        )

    def test_empty_object(self, empty_root):
        assert zod.generate(empty_root, "Thing") == "const ThingSchema = z.object({});"

    def test_three_levels_of_nesting(self, deep_root):
        out = zod.generate(deep_root)
        assert out.count("z.object({") == 3
        assert "      c: z.number()," in out

    def test_modifier_order(self):
        root = FieldType("root", "object", children=(
            FieldType("v", "string", optional=True, nullable=True),
        ))
        assert "  v: z.string().optional().nullable()," in zod.generate(root)

    def test_null_and_empty_array(self):
        out = zod.generate(infer_from_json_string('{"x": null, "e": []}'))
        assert "  x: z.null().nullable()," in out
        assert "  e: z.array(z.any())," in out

    def test_array_of_objects(self):
        out = zod.generate(infer_from_json_string('{"u": [{"id": 1}]}'))
        assert "  u: z.array(z.object({\n    id: z.number(),\n  }))," in out


class TestPrismaGenerator:
    def test_end_to_end(self, sample_root):
        assert prisma.generate(sample_root) == (
            "model Model {\n"
            "  name String\n"
            "  age Int\n"
            "  tags String[]\n"
            "  address Json\n"
            "}"
        )

    def test_empty_object(self, empty_root):
        assert prisma.generate(empty_root, "User") == "model User {\n  // Empty model\n}"

    def test_nested_objects_are_not_expanded(self, deep_root):
        out = prisma.generate(deep_root)
        assert out == "model Model {\n  a Json\n}"

    @pytest.mark.parametrize("text, line", [
        ('{"x": null}', "  x String?"),
        ('{"x": true}', "  x Boolean"),
        ('{"x": [1, 2]}', "  x String[]"),
        ('{"x": [{"a": 1}]}', "  x String[]"),
    ])
    def test_type_mapping(self, text, line):
        assert line in prisma.generate(infer_from_json_string(text)).splitlines()

    def test_optional_marker(self):
        root = infer_from_samples([{"a": 1, "b": "x"}, {"a": 2}])
        lines = prisma.generate(root).splitlines()
        assert "  a Int" in lines
        assert "  b String?" in lines


class TestMongooseGenerator:
    def test_end_to_end(self, sample_root):
        assert mongoose.generate(sample_root) == (
            "const ModelSchema = new mongoose.Schema({\n"
            "  name: String,\n"
            "  age: Number,\n"
            "  tags: [String],\n"
            "  address: {\n"
            "    city: String,\n"
            "  },\n"
            "});"
        )

    def test_empty_object(self, empty_root):
        assert mongoose.generate(empty_root) == "const ModelSchema = new mongoose.Schema({});"

    def test_recurses_into_nested_objects(self, deep_root):
        out = mongoose.generate(deep_root)
        assert "      c: Number," in out

    def test_wrappers(self):
        root = FieldType("root", "object", children=(
            FieldType("o", "string", optional=True),
            FieldType("n", "number", nullable=True),
            FieldType("both", "boolean", optional=True, nullable=True),
        ))
        out = mongoose.generate(root)
        assert "  o: { type: String, required: false }," in out
        assert "  n: { type: Number, default: null }," in out
        # nullable wins over optional
        assert "  both: { type: Boolean, default: null }," in out

    def test_arrays(self):
        out = mongoose.generate(infer_from_json_string('{"n": [1], "e": [], "o": [{"a": 1}]}'))
        assert "  n: [Number]," in out
        assert "  e: [String]," in out
        assert "  o: [mongoose.Schema.Types.Mixed]," in out


@pytest.mark.parametrize("module", [typescript, zod, prisma, mongoose])
def test_generators_are_total_on_degenerate_roots(module):
    for root in (
        FieldType("root", "object", children=()),
        FieldType("root", "number"),
        FieldType("root", "array", array=True, array_item_type="null"),
        FieldType("root", "null", nullable=True),
    ):
        out = module.generate(root)
        assert out.strip()
        assert out.count("{") == out.count("}")
