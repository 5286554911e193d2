"""Built-in tip catalog: twenty C# idioms.

Pure data, no code dependencies. Each record carries the four catalog
fields; samples are stored verbatim and never compiled or checked.
"""

from __future__ import annotations

TIPS: list[dict] = [
    {
        "ordinal": 1,
        "title": "Use LINQ for collection queries",
        "explanation": "Filtering, projecting and aggregating with LINQ reads as a declaration of intent instead of a hand-written loop.",
        "sample": "var adults = people.Where(p => p.Age >= 18).Select(p => p.Name).ToList();",
    },
    {
        "ordinal": 2,
        "title": "Use using statements for disposables",
        "explanation": "A using block (or using declaration) guarantees Dispose() runs even when an exception escapes.",
        "sample": "using (var reader = new StreamReader(path))\n{\n    Console.WriteLine(reader.ReadToEnd());\n}",
    },
    {
        "ordinal": 3,
        "title": "Prefer string interpolation",
        "explanation": "Interpolated strings keep values next to the text they appear in and avoid positional format mistakes.",
        "sample": "var message = $\"Hello, {user.Name}! You have {count} new messages.\";",
    },
    {
        "ordinal": 4,
        "title": "Use var when the type is obvious",
        "explanation": "Implicit typing removes repetition when the right-hand side already names the type.",
        "sample": "var customers = new Dictionary<int, Customer>();",
    },
    {
        "ordinal": 5,
        "title": "Use the null-conditional operator",
        "explanation": "?. short-circuits to null instead of throwing NullReferenceException on a missing link in a chain.",
        "sample": "var city = order?.Customer?.Address?.City;",
    },
    {
        "ordinal": 6,
        "title": "Use the null-coalescing operator",
        "explanation": "?? supplies a fallback value and ??= assigns only when the target is null.",
        "sample": "var name = input ?? \"anonymous\";\ncache ??= new Dictionary<string, int>();",
    },
    {
        "ordinal": 7,
        "title": "Use expression-bodied members",
        "explanation": "Single-expression methods and properties read better with =>.",
        "sample": "public string FullName => $\"{First} {Last}\";\npublic int Square(int x) => x * x;",
    },
    {
        "ordinal": 8,
        "title": "Use async and await for I/O",
        "explanation": "Asynchronous I/O frees the calling thread while waiting; await keeps the code sequential to read.",
        "sample": "public async Task<string> FetchAsync(HttpClient client, string url)\n{\n    return await client.GetStringAsync(url);\n}",
    },
    {
        "ordinal": 9,
        "title": "Use pattern matching",
        "explanation": "is and switch patterns test and bind a value in one step, replacing cast-then-check code.",
        "sample": "if (shape is Circle { Radius: > 0 } c)\n{\n    Console.WriteLine(c.Radius);\n}",
    },
    {
        "ordinal": 10,
        "title": "Use switch expressions",
        "explanation": "A switch expression maps inputs to values concisely and the compiler warns about unhandled cases.",
        "sample": "var label = status switch\n{\n    Status.Active => \"on\",\n    Status.Paused => \"paused\",\n    _ => \"off\",\n};",
    },
    {
        "ordinal": 11,
        "title": "Use records for immutable data",
        "explanation": "Records give value equality, a readable ToString and non-destructive mutation with with-expressions.",
        "sample": "public record Point(int X, int Y);\nvar moved = origin with { X = 5 };",
    },
    {
        "ordinal": 12,
        "title": "Use object and collection initializers",
        "explanation": "Initializers set properties and fill collections at construction without a series of assignments.",
        "sample": "var user = new User { Name = \"Ada\", Roles = { \"admin\", \"dev\" } };",
    },
    {
        "ordinal": 13,
        "title": "Use nameof instead of string literals",
        "explanation": "nameof keeps member names in messages and argument checks in sync with refactoring.",
        "sample": "throw new ArgumentNullException(nameof(customer));",
    },
    {
        "ordinal": 14,
        "title": "Use tuples for lightweight multiple returns",
        "explanation": "Named value tuples return several values without declaring a one-off class.",
        "sample": "(int min, int max) Bounds(int[] xs) => (xs.Min(), xs.Max());\nvar (lo, hi) = Bounds(values);",
    },
    {
        "ordinal": 15,
        "title": "Use TryParse instead of catching exceptions",
        "explanation": "TryParse reports failure through its return value, which is cheaper and clearer than try/catch around Parse.",
        "sample": "if (int.TryParse(text, out var number))\n{\n    Use(number);\n}",
    },
    {
        "ordinal": 16,
        "title": "Use StringBuilder in loops",
        "explanation": "Repeated string concatenation allocates a new string each time; StringBuilder appends in place.",
        "sample": "var sb = new StringBuilder();\nforeach (var line in lines)\n{\n    sb.AppendLine(line);\n}\nvar text = sb.ToString();",
    },
    {
        "ordinal": 17,
        "title": "Use readonly for fields set once",
        "explanation": "readonly fields can only be assigned in a constructor, which documents and enforces immutability.",
        "sample": "private readonly ILogger _logger;\n\npublic Service(ILogger logger) => _logger = logger;",
    },
    {
        "ordinal": 18,
        "title": "Use extension methods for fluent helpers",
        "explanation": "Extension methods add behaviour to types you do not own while keeping call sites fluent.",
        "sample": "public static class StringExtensions\n{\n    public static bool IsBlank(this string s) => string.IsNullOrWhiteSpace(s);\n}",
    },
    {
        "ordinal": 19,
        "title": "Use IEnumerable and yield return for lazy sequences",
        "explanation": "Iterator methods produce items on demand, so large or infinite sequences never materialize at once.",
        "sample": "IEnumerable<int> Evens()\n{\n    for (var i = 0; ; i += 2)\n        yield return i;\n}",
    },
    {
        "ordinal": 20,
        "title": "Use dependency injection",
        "explanation": "Receiving collaborators through the constructor keeps classes testable and decoupled from concrete implementations.",
        "sample": "public class OrderService\n{\n    private readonly IRepository _repo;\n    public OrderService(IRepository repo) => _repo = repo;\n}",
    },
]
