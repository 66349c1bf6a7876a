from teamify.migrator import run

if __name__ == "__main__":
    run()
