# request_builder Example Usage

import io

from request_builder import (
    BodyReadError,
    FileAttachment,
    HttpClient,
    HttpRequest,
    RequestOptions,
    RequestsTransport,
    set_default_user_agent,
)


def main():
    """Demonstrate request_builder usage with examples."""

    print("=== request_builder Demo ===\n")

    set_default_user_agent("request-builder-demo/0.1")

    # Example 1: Builder GET with query parameters
    print("1. GET with query parameters:")
    try:
        response = (
            HttpRequest()
            .set_headers({"Accept": "application/json"})
            .set_params({"test": "1"})
            .get("https://httpbin.org/get")
        )
        print(f"   Status: {response.status_code} {response.status}")
        print(f"   Args echoed: {response.json().get('args')}")
    except Exception as e:
        print(f"   Error: {e}")

    print()

    # Example 2: POST with JSON (JSON wins over form data)
    print("2. POST with JSON:")
    try:
        response = (
            HttpRequest()
            .set_json({"name": "John Doe", "age": 30})
            .post("https://httpbin.org/post")
        )
        print(f"   Status: {response.status_code}")
        print(f"   JSON echoed: {response.json().get('json')}")
    except Exception as e:
        print(f"   Error: {e}")

    print()

    # Example 3: Multipart upload
    print("3. Multipart upload:")
    try:
        files = [
            FileAttachment("first", "a.txt", io.BytesIO(b"alpha")),
            FileAttachment("second", "b.txt", io.BytesIO(b"beta")),
        ]
        response = (
            HttpRequest()
            .set_data({"title": "demo"})
            .set_files(files)
            .post("https://httpbin.org/post")
        )
        print(f"   Files echoed: {sorted(response.json().get('files', {}))}")
    except Exception as e:
        print(f"   Error: {e}")

    print()

    # Example 4: Immutable options with a shared client
    print("4. RequestOptions with one client:")
    with HttpClient(transport=RequestsTransport(timeout=10)) as client:
        options = RequestOptions(cookies={"session": "abc"}, user_agent="demo-agent")
        try:
            response = client.get("https://httpbin.org/cookies", options)
            print(f"   Cookies echoed: {response.json().get('cookies')}")

            response = client.get("https://httpbin.org/status/404", options)
            print(f"   Status: {response.status_code} {response.status} (not an exception)")
            print(f"   Headers: {dict(response.headers)}")
        except BodyReadError as e:
            print(f"   Body could not be read: {e.message}")
        except Exception as e:
            print(f"   Error: {e}")

    print("\n=== Demo Complete ===")


if __name__ == "__main__":
    main()
