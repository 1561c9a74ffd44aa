from devops_hello.server import main

if __name__ == '__main__':
    main()
