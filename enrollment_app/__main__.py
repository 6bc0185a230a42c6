from . import create_app


def main():
    app = create_app()
    port = app.config['PORT']
    print(f"Course enrollment running on http://localhost:{port}")
    app.run(port=port, threaded=False)


if __name__ == '__main__':
    main()
