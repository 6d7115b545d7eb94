from steerable_freq import SourceApp, SourceConfig


def main():
    cfg = SourceConfig()
    app = SourceApp(cfg)
    app.run()


if __name__ == "__main__":
    main()
